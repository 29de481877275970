import asyncio
import os
from typing import Any, Optional
from txkit.config.loader import get_core_config
from txkit.utils.decoders import DecoderManager, LogDecoder
from txkit.utils.file_io import ensure_path, read_pre_signed_tx_file
from txkit.utils.lifecycle import await_all, extract_event, submit_and_await
from txkit.utils.logging import logger, configure_console_logging, configure_file_logging
from txkit.utils.models.settings_model import Settings
from txkit.utils.rpc import RpcHelper, send_raw_transaction

# One line per broadcast transaction: raw tx, status, block height
STATUSES_FILE = "statuses.csv"


async def broadcast_batch(settings: Settings, rpc: RpcHelper, decoder: Optional[LogDecoder] = None):
    """Broadcast every transaction of the pre-signed batch file and report the outcomes."""
    raw_txs = read_pre_signed_tx_file(settings.batch.pre_signed_file)
    logger.info(f"📨 Broadcasting {len(raw_txs)} pre-signed transactions from {settings.batch.pre_signed_file}")
    event_name = settings.batch.event_name

    async def track(raw_tx: str) -> Any:
        receipt = await submit_and_await(send_raw_transaction, rpc, raw_tx, settings.batch.poll_interval)
        if decoder is not None and event_name:
            logger.info(f"🔎 {event_name}: {extract_event(receipt, decoder, event_name)!r}")
        return receipt

    summaries = await await_all([track(raw_tx) for raw_tx in raw_txs])
    if summaries:
        statuses_file = os.path.join(settings.batch.output_dir, STATUSES_FILE)
        with open(statuses_file, "w", encoding="utf-8") as f:
            f.writelines(
                f"{raw_tx},{summary.status},{summary.height}\n" for raw_tx, summary in zip(raw_txs, summaries)
            )
        logger.info(f"💾 Recorded {len(summaries)} outcomes in {statuses_file}")
    return summaries


async def main():
    rpc = None
    try:
        settings = get_core_config()
        # Reconfigure logging with settings
        configure_console_logging("DEBUG" if settings.logs.debug_mode else settings.logs.level)
        configure_file_logging(
            write_to_files=settings.logs.write_to_files,
            logs_dir=settings.logs.logs_dir,
        )
        logger.info("🚀 Starting transaction batch run...")
        ensure_path(settings.batch.output_dir)
        decoder = DecoderManager.load_decoder(settings.decoder) if settings.batch.event_name else None
        rpc = RpcHelper(settings.rpc)
        await broadcast_batch(settings, rpc, decoder)
    except Exception as e:
        logger.critical(f"🆘 Batch run failed: {e}")
        raise
    finally:
        logger.info("Shutting down resources...")
        if rpc:
            await rpc.close()
        logger.info("Shutdown complete.")


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("🛑 Run interrupted by user.")


if __name__ == "__main__":
    run()
