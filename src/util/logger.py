import sys

from loguru import logger

PALETTE = {
    "maze_solver": "green",
    "pursuit_solver": "blue",
    "cli": "magenta",
}

LEVEL_PER_COMPONENT = {
    "": "INFO",
}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(
        LEVEL_PER_COMPONENT.get(comp, LEVEL_PER_COMPONENT[""])
    ).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # The tag lives in the *template* that the sink receives,
    # so Loguru will translate it to ANSI codes.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<15}</> | "
        "<level>{message}</level>\n"
    )


def set_verbosity(verbose: bool) -> None:
    LEVEL_PER_COMPONENT[""] = "DEBUG" if verbose else "INFO"


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
