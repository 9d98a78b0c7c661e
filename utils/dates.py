import datetime as dt
import locale


def _parse(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        # full timestamps, e.g. 2001-05-03T00:00:00Z
        return dt.datetime.fromisoformat(value.replace('Z', '+00:00')).date()


def use_system_locale():
    """Switch LC_TIME to the environment's locale; keeps the current one if unavailable."""
    try:
        locale.setlocale(locale.LC_TIME, '')
    except locale.Error:
        pass


def locale_date_format() -> str:
    """The locale's date layout, always with a four-digit year."""
    try:
        fmt = locale.nl_langinfo(locale.D_FMT)
    except AttributeError:  # nl_langinfo is POSIX-only
        fmt = '%m/%d/%Y'
    return (fmt or '%m/%d/%Y').replace('%y', '%Y')


def format_birth_date(value: str) -> str:
    """Format an ISO date using the locale's date representation.

    Anything that does not parse is returned unchanged.
    """
    if not isinstance(value, str):
        return value
    try:
        parsed = _parse(value.strip())
    except ValueError:
        return value
    return parsed.strftime(locale_date_format())
