"""Runtime configuration and structured logging for kombi.

kombi is silent until asked otherwise. `init` (or `configure_logging`)
turns on output for the `kombi` logger, which is where `traced` stages
report.

Example:
    ```python
    from kombi import traced
    from kombi.runtime import init

    init(log_level='DEBUG')
    traced(int, name='parse')('3')  # logs stage.call / stage.return
    ```
"""

from kombi.runtime._config import KombiConfig, get_config, init
from kombi.runtime._logging import LOGGER_NAME, configure_logging, get_logger, reset_logging

__all__ = [
    'LOGGER_NAME',
    'KombiConfig',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'reset_logging',
]
