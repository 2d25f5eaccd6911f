import logging
import sys
from trainer_core.version import get_git_version
from trainer_core.metrics import build_metrics
from trainer_core.reports import summary
from trainer_core.sample_workouts import SAMPLE_WORKOUTS


def configure_logging() -> bool:
    """ Set logging level based on --debug, returns whether debug is on """
    debug = ("--debug" in sys.argv) or ("-d" in sys.argv)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    if debug:
        logging.debug("🔧 Debug mode enabled")
    return debug


def print_sample_summaries(metrics):
    """ Prints the summary of every sample workout """
    for record in SAMPLE_WORKOUTS:
        print(summary(record, metrics))


def main():

    if configure_logging():
        logging.debug(f"🏃 Trainer metrics v{get_git_version()}")

    metrics = build_metrics()                   # Build metrics dict
    print_sample_summaries(metrics)
    return 0

if __name__ == "__main__":
    sys.exit(main())
