"""
Geohash encoding.

A geohash interleaves longitude and latitude bisection bits (longitude first)
and packs them five at a time into a base-32 alphabet that omits a, i, l, o.
"""

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
DEFAULT_PRECISION = 7


def encode(lat: float, lon: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode a coordinate as a geohash string.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees
        precision: Number of output characters

    Returns:
        Geohash of length ``precision``
    """
    lat_lo, lat_hi = -90.0, 90.0
    lon_lo, lon_hi = -180.0, 180.0
    even = True
    bit = 0
    ch = 0
    chars: list[str] = []

    while len(chars) < precision:
        if even:
            mid = (lon_lo + lon_hi) / 2
            if lon >= mid:
                ch = (ch << 1) | 1
                lon_lo = mid
            else:
                ch = ch << 1
                lon_hi = mid
        else:
            mid = (lat_lo + lat_hi) / 2
            if lat >= mid:
                ch = (ch << 1) | 1
                lat_lo = mid
            else:
                ch = ch << 1
                lat_hi = mid
        even = not even
        bit += 1
        if bit == 5:
            chars.append(BASE32[ch])
            bit = 0
            ch = 0

    return "".join(chars)


def decode_bounds(geohash: str) -> tuple[float, float, float, float]:
    """
    Decode a geohash into its cell bounds.

    Returns:
        (lat_min, lat_max, lon_min, lon_max)

    Raises:
        ValueError: If the string contains characters outside the alphabet
    """
    lat_lo, lat_hi = -90.0, 90.0
    lon_lo, lon_hi = -180.0, 180.0
    even = True

    for char in geohash.lower():
        idx = BASE32.find(char)
        if idx < 0:
            raise ValueError(f"Invalid geohash character: {char!r}")
        for shift in range(4, -1, -1):
            bit = (idx >> shift) & 1
            if even:
                mid = (lon_lo + lon_hi) / 2
                if bit:
                    lon_lo = mid
                else:
                    lon_hi = mid
            else:
                mid = (lat_lo + lat_hi) / 2
                if bit:
                    lat_lo = mid
                else:
                    lat_hi = mid
            even = not even

    return lat_lo, lat_hi, lon_lo, lon_hi
