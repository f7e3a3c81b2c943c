# Magic numbers for sniffing files without a known extension.
# Source: https://en.wikipedia.org/wiki/List_of_file_signatures
PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
JPEG_MAGIC = b"\xff\xd8\xff\xe0"
GIF_MAGIC = b"GIF8"
BMP_MAGIC = b"BM"
ICO_MAGIC = b"\x00\x00\x01\x00"

# Upper half block: foreground paints the top pixel, background the bottom one
HALF_BLOCK = "▀"

# 8 normal + 8 bold foreground colours, in palette order
ANSI_COLOUR_ESCAPES = tuple(f"\033[0;{code}m" for code in range(30, 38)) + tuple(
    f"\033[1;{code}m" for code in range(30, 38)
)

# Background escapes only exist for the 8 normal colours
ANSI_BG_COLOUR_ESCAPES = tuple(f"\033[{code}m" for code in range(40, 48))

ANSI_RESET_ATTRIBUTES = "\033[0m"

TRUECOLOR_FG = "\033[38;2;{};{};{}m"
TRUECOLOR_BG = "\033[48;2;{};{};{}m"

# Luminance ramp, dark to light
ASCII_RAMP = " .,-~+=@"

# Linux-theme colours, in the same order as ANSI_COLOUR_ESCAPES.
# Taken from the `colorname` table in st's config.def.h, decoded via the X11 colour names:
# black, red3, green3, yellow3, blue2, magenta3, cyan3, gray90,
# gray50, red, green, yellow, #5c5cff, magenta, cyan, white
ANSI_COLOURS_BLACK_BG = (
    (0x00, 0x00, 0x00),
    (0xCD, 0x00, 0x00),
    (0x00, 0xCD, 0x00),
    (0xCD, 0xCD, 0x00),
    (0x00, 0x00, 0xEE),
    (0xCD, 0x00, 0xCD),
    (0x00, 0xCD, 0xCD),
    (0xE6, 0xE6, 0xE6),
    (0x80, 0x80, 0x80),
    (0xFF, 0x00, 0x00),
    (0x00, 0xFF, 0x00),
    (0xFF, 0xFF, 0x00),
    (0x5C, 0x5C, 0xFF),
    (0xFF, 0x00, 0xFF),
    (0x00, 0xFF, 0xFF),
    (0xFF, 0xFF, 0xFF),
)

# Colours of a light-background (Solarized light) terminal, same order as ANSI_COLOUR_ESCAPES
ANSI_COLOURS_WHITE_BG = (
    (0xEE, 0xE8, 0xD5),
    (0xDC, 0x32, 0x2F),
    (0x85, 0x99, 0x00),
    (0xB5, 0x89, 0x00),
    (0x26, 0x8B, 0xD2),
    (0xD3, 0x36, 0x82),
    (0x2A, 0xA1, 0x98),
    (0x07, 0x36, 0x42),
    (0xFD, 0xF6, 0xE3),
    (0xCB, 0x4B, 0x16),
    (0x93, 0xA1, 0xA1),
    (0x83, 0x94, 0x96),
    (0x65, 0x7B, 0x83),
    (0x6C, 0x71, 0xC4),
    (0x58, 0x6E, 0x75),
    (0x00, 0x2B, 0x36),
)
