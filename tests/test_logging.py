import logging

from infra import configure_logging, get_logger


def test_configure_logging_writes_file_and_sets_engine_level(tmp_path):
    logfile = tmp_path / "logs" / "run.log"
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging("INFO", logfile=logfile, engine_level="WARNING")
        get_logger("gridlife.test").warning("engine warning")
        get_logger("gridlife.test").info("engine chatter")
        get_logger("runner").info("runner info")
        for handler in root.handlers:
            handler.flush()

        text = logfile.read_text(encoding="utf-8")
        assert "engine warning" in text
        assert "runner info" in text
        assert "engine chatter" not in text
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        logging.getLogger("gridlife").setLevel(logging.NOTSET)
