from __future__ import annotations


def _simple_case(ch: str, upper: bool) -> str:
    # Go's unicode.ToUpper/ToLower map one rune to one rune; str.upper() may
    # expand ("ß" -> "SS", "İ" -> "i" + U+0307). Keep the letter in that case.
    mapped = ch.upper() if upper else ch.lower()
    return mapped if len(mapped) == 1 else ch


def decl_name(name: str, export: bool = False) -> str:
    """Sanitize ``name`` into a Go identifier.

    - letters are kept; the first one is upper-cased when ``export`` is set,
      lower-cased otherwise
    - every run of non-letters (digits included) after the first letter
      collapses to a single ``_``
    - non-letters before the first letter are dropped

    The result is empty when ``name`` has no letters.
    """
    out: list[str] = []
    for ch in name:
        if ch.isalpha():
            if not out:
                out.append(_simple_case(ch, export))
            else:
                out.append(ch)
        elif out and out[-1] != "_":
            out.append("_")
    return "".join(out)
