from datetime import timedelta


def fmt_str_decimals(fl_num) -> str:
    """ Format string decimal numbers, returns formatted string """
    fmt_num = "{:.2f}".format(fl_num)
    return fmt_num


def fmt_minutes(duration: timedelta | float | int) -> str:
    """ Takes a timedelta (or seconds) and returns whole minutes, printf-style rounding """
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    return "{:.0f}".format(seconds / 60)
