"""Easter Sunday (Gregorian computus)."""

from datetime import date

from .dates import DEFAULT_OFFSET, parse_iso_date


def easter_sunday(year: int, offset: str = DEFAULT_OFFSET) -> date:
    """Compute Easter Sunday using the Anonymous Gregorian (Butcher) algorithm.

    Easter Sunday is not a holiday in Colombia; only days at a fixed offset
    from it are:
      -3  Jueves Santo
      -2  Viernes Santo
      +43 Ascensión de Jesús
      +64 Corpus Christi
      +71 Sagrado Corazón de Jesús
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return parse_iso_date(year, month, day + 1, offset)
