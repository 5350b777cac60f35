"""Human-readable color text for the readout."""


def format_color(argb: int) -> str:
    """Format a 32-bit ARGB sample, e.g. ``RGBA(16,32,48,255) HEX #102030``.

    The full ``#AARRGGBB`` form is appended only for non-opaque colors.
    """
    argb &= 0xFFFFFFFF
    a = (argb >> 24) & 0xFF
    r = (argb >> 16) & 0xFF
    g = (argb >> 8) & 0xFF
    b = argb & 0xFF
    text = f"RGBA({r},{g},{b},{a}) HEX #{r:02X}{g:02X}{b:02X}"
    if a != 0xFF:
        text += f" (#{a:02X}{r:02X}{g:02X}{b:02X})"
    return text
