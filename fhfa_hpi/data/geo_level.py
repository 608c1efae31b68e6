"""Geography class detection from sheet titles."""

from ..config.constants import GEO_LEVELS, GEO_LEVEL_KEYWORDS, UNKNOWN_GEO_LEVEL


def detect_geo_level(header: str) -> str:
    """
    Geographic level of a sheet (e.g. metro, us) from its title text.
    
    Parameters
    ----------
    header : str
        Title cell of the sheet
        
    Returns
    -------
    str
        One of GEO_LEVELS, or UNKNOWN_GEO_LEVEL if no keyword matches
    """
    header = (header or "").lower()
    
    for keyword, level in GEO_LEVEL_KEYWORDS:
        if keyword in header:
            return level
    
    return UNKNOWN_GEO_LEVEL


def is_geo_level(label: str) -> bool:
    """Check that ``label`` is a supported geography class."""
    return label in GEO_LEVELS
