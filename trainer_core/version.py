import logging
import subprocess
from importlib.metadata import PackageNotFoundError, version


logger = logging.getLogger(__name__)

DIST_NAME = "trainer-metrics"


def get_git_version(default="0.0.0"):
    """ Gets git tag, falls back to the installed distribution version, then to default """
    try:
        tag = subprocess.check_output(
            ["git", "describe", "--tags", "--abbrev=0"],
            stderr=subprocess.DEVNULL       # hide git error messages
        )
        return tag.decode("utf-8").strip()
    except (subprocess.CalledProcessError, FileNotFoundError, OSError) as e:
        logger.debug("No git tag available: %s", e)

    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        logger.warning("⚠️ Could not determine version, using %s", default)
        return default
