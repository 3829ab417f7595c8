import logging

from bighits.logging_config import setup_logging


def test_setup_logging_is_repeatable(tmp_path):
    log_file = tmp_path / 'bighits.log'
    setup_logging('debug')
    setup_logging(logging.INFO, log_file=str(log_file))

    logger = logging.getLogger('bighits')
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2

    logging.getLogger('bighits.core.collection').info('hello from the controller')
    for handler in logger.handlers:
        handler.flush()
    assert 'hello from the controller' in log_file.read_text(encoding='utf-8')


def test_unknown_level_falls_back_to_info():
    setup_logging('chatty')
    assert logging.getLogger('bighits').level == logging.INFO
