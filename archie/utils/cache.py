import logging

logger = logging.getLogger(__name__)


def read_history(path):
    try:
        return [line for line in path.read_text().splitlines() if line]
    except Exception:
        return []


def write_history(path, entries, limit=100):
    kept = [e for e in entries if e][-limit:] if limit > 0 else []
    path.write_text("".join(f"{e}\n" for e in kept))
    logger.debug("wrote %d history entries to %s", len(kept), path)
