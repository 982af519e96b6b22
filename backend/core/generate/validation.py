MIN_TEXT_LENGTH = 10

# Characters removed by the browser's String.prototype.trim(). Unlike
# str.strip() this leaves U+001C..U+001F and U+0085 alone and removes U+FEFF.
TRIM_CHARS = "\t\n\v\f\r " + "".join(map(chr, (
    0x00A0, 0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF
)))

def trimmed_length(text: str) -> int:
    """Length of the trimmed text in UTF-16 code units, as the web form measures it."""
    return len(text.strip(TRIM_CHARS).encode("utf-16-le")) // 2

def is_long_enough(text: str | None) -> bool:
    return bool(text) and trimmed_length(text) >= MIN_TEXT_LENGTH
