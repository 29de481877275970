from pydantic import BaseModel, field_validator
from typing import Optional


class RPCConfig(BaseModel):
    """JSON-RPC endpoint configuration model."""
    url: str
    retry: int = 0
    request_time_out: int = 30


class Logs(BaseModel):
    """Logging configuration model."""
    debug_mode: bool = False
    write_to_files: bool = False
    level: str = "INFO"
    logs_dir: str = "logs"


class DecoderConfig(BaseModel):
    """Event decoder selection.

    ``kind`` is either a built-in alias (``event_list`` or ``raw_log``) or
    ``custom``, in which case ``module`` and ``class_name`` name the class.
    """
    kind: str = "raw_log"
    module: Optional[str] = None
    class_name: Optional[str] = None
    abi_path: Optional[str] = None

    @field_validator('kind')
    @classmethod
    def _normalize_kind(cls, value: str) -> str:
        return value.strip().lower()


class BatchConfig(BaseModel):
    """Pre-signed transaction batch configuration."""
    pre_signed_file: str = "txs/pre_signed.txt"
    output_dir: str = "txs"
    poll_interval: float = 1.0
    # When set, the first argument of this event is logged for every receipt
    event_name: Optional[str] = None


class Settings(BaseModel):
    """Main settings configuration model."""
    rpc: RPCConfig
    logs: Logs = Logs()
    decoder: DecoderConfig = DecoderConfig()
    batch: BatchConfig = BatchConfig()
