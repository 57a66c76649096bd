"""
structlog setup shared by the CLI and the HTTP API.

Quotes are printed on stdout, so every log line goes to stderr.
"""

import os
import sys

import structlog

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


def console_output_wanted() -> bool:
    """LOG_FORMAT=json|human wins; otherwise colour only when stderr is a terminal"""
    log_format = os.getenv("LOG_FORMAT", "").lower()

    if log_format == "json":
        return False

    if log_format == "human":
        return True

    return sys.stderr.isatty()


def _component_tagger(component: str):
    def tag_component(logger, method_name, event_dict):
        event_dict["component"] = component
        return event_dict

    return tag_component


def configure_logging(
    level: str = "INFO", format_type: str = "auto", component: str = None
) -> None:
    """
    Route structlog output to stderr as coloured console lines or JSON.

    Safe to call more than once; the CLI calls it again after the engine
    config has been read.

    Args:
        level: Minimum level name; unknown names fall back to INFO
        format_type: "json", "human", or "auto" to decide from the terminal
        component: Tag stamped on every event as ``component``
    """
    if format_type == "auto":
        console = console_output_wanted()
    else:
        console = format_type == "human"

    processors = [
        structlog.processors.TimeStamper(fmt="%H:%M:%S" if console else "ISO"),
        structlog.processors.add_log_level,
    ]
    if component:
        processors.append(_component_tagger(component))
    processors.append(structlog.processors.StackInfoRenderer())

    if console:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.extend([structlog.processors.format_exc_info, structlog.processors.JSONRenderer()])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LEVELS.get(level.upper(), 20)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = None):
    return structlog.get_logger(name)
