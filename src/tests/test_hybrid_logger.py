import logging

from utils import HybridLogger


def test_class_loggers_are_cached_and_filter_by_level(tmp_path):
    main_logger = HybridLogger("SimonLogTest", log_dir=str(tmp_path))
    try:
        quiet = main_logger.get_class_logger("Quiet", logging.WARNING)
        assert main_logger.get_class_logger("Quiet") is quiet

        quiet.info("should be filtered")
        quiet.warning("kept warning")
        child = quiet.create_class_logger("Child")
        child.error("child error")
        quiet.flush()

        content = main_logger.log_filename.read_text(encoding="utf-8")
    finally:
        main_logger.cleanup()

    assert "should be filtered" not in content
    assert "[WARNING] [Quiet] kept warning" in content
    assert "[ERROR] [Child] child error" in content
    # File output carries no ANSI colors
    assert "\033[" not in content


def test_error_with_exception_adds_location(tmp_path):
    main_logger = HybridLogger("SimonLogTest", log_dir=str(tmp_path))
    try:
        logger = main_logger.get_main_logger()
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            logger.error("Step failed", exception=e)
        logger.flush()
        content = main_logger.log_filename.read_text(encoding="utf-8")
    finally:
        main_logger.cleanup()

    assert "Step failed | Type: RuntimeError" in content
    assert "[Main]" in content


def test_console_only_logger_writes_no_file(tmp_path):
    main_logger = HybridLogger("SimonLogTest", log_dir=str(tmp_path / "logs"), log_to_file=False)
    main_logger.get_main_logger().info("console only")
    main_logger.cleanup()

    assert main_logger.log_filename is None
    assert not (tmp_path / "logs").exists()
