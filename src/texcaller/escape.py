"""Escaping of arbitrary text for direct use in LaTeX source."""

from __future__ import annotations

_LATEX_ESCAPE_MAP = {
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "[": "{[}",
    "]": "{]}",
    '"': "{''}",
    "\\": r"\textbackslash{}",
    "~": r"\textasciitilde{}",
    "<": r"\textless{}",
    ">": r"\textgreater{}",
    "^": r"\textasciicircum{}",
    # keeps ?` and !` from turning into inverted punctuation
    "`": "{}`",
    "\n": "\\\\",
}


def escape_latex(value: str) -> str:
    """Escape LaTeX special characters in user/content text."""

    return "".join(_LATEX_ESCAPE_MAP.get(char, char) for char in value)
