"""Noise-masked cross-dissolve pass applicable to any shader source.

:func:`wrap_with_morph` declares two extra uniforms, injects a small
fractal-noise alpha function before the entry point and rewrites the alpha
argument of every ``return half4(...)`` inside the entry point. Entry points
typed with GLSL ``vec`` types receive the helpers spelled with ``vec2``.
Everything else in the source is kept byte-for-byte. Sources the pass does not
recognise come back unchanged.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

_LOGGER = logging.getLogger("vibeshaders.morph")

MORPH_DEFAULTS: Dict[str, float] = {
    "u_morphProgress": 0.0,
    "u_morphDirection": 1.0,
}

MORPH_UNIFORMS = (
    "uniform float u_morphProgress;",
    "uniform float u_morphDirection;",
)

# Four octaves, unrolled: loop bounds must be compile-time constants.
MORPH_FUNCTIONS = """// === MORPH TRANSITION ===

float morphHash(float2 p) {
  return fract(sin(dot(p, float2(127.1, 311.7))) * 43758.5453);
}

float morphNoise(float2 p) {
  float2 i = floor(p);
  float2 f = fract(p);
  float2 u = f * f * (3.0 - 2.0 * f);

  return mix(
    mix(morphHash(i + float2(0.0, 0.0)), morphHash(i + float2(1.0, 0.0)), u.x),
    mix(morphHash(i + float2(0.0, 1.0)), morphHash(i + float2(1.0, 1.0)), u.x),
    u.y
  );
}

float morphFbm(float2 p) {
  float value = 0.0;
  float amplitude = 0.5;
  float frequency = 1.0;

  // Octave 1
  value += amplitude * morphNoise(p * frequency);
  frequency *= 2.0;
  amplitude *= 0.5;
  // Octave 2
  value += amplitude * morphNoise(p * frequency);
  frequency *= 2.0;
  amplitude *= 0.5;
  // Octave 3
  value += amplitude * morphNoise(p * frequency);
  frequency *= 2.0;
  amplitude *= 0.5;
  // Octave 4
  value += amplitude * morphNoise(p * frequency);

  return value;
}

float getMorphAlpha(float2 xy, float2 resolution, float progress, float direction) {
  float2 uv = xy / min(resolution.x, resolution.y);
  float grain = morphFbm(uv * 3.0);

  // Threshold sweeps from above the noise range to below it as progress grows
  float edge = 0.15;
  float threshold = mix(1.0 + edge, -edge, progress);
  float mask = smoothstep(threshold - edge, threshold + edge, grain);

  return direction > 0.0 ? mask : (1.0 - mask);
}

// === END MORPH TRANSITION ===
"""

ENTRY_RETURN_TYPES = ("half4", "float4", "vec4")
ENTRY_PARAM_TYPES = ("float2", "vec2")

_ALPHA_CAST = {"half4": "half", "float4": "float", "vec4": "float"}
_GLSL_TYPES = ("vec4", "vec2")

_TOKEN_RE = re.compile(
    r"""
    (?P<comment>//[^\n]*|/\*.*?\*/)
    |(?P<space>\s+)
    |(?P<number>(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?[fFhH]?)
    |(?P<ident>[A-Za-z_]\w*)
    |(?P<punct>.)
    """,
    re.VERBOSE | re.DOTALL,
)


class Token(NamedTuple):
    kind: str
    text: str
    start: int
    end: int


class _Edit(NamedTuple):
    start: int
    end: int
    text: str


def tokenize(source: str) -> List[Token]:
    """Split *source* into comment, space, number, ident and punct tokens."""

    return [
        Token(match.lastgroup or "punct", match.group(), match.start(), match.end())
        for match in _TOKEN_RE.finditer(source)
    ]


def _significant(tokens: Sequence[Token]) -> List[Token]:
    return [token for token in tokens if token.kind not in ("comment", "space")]


def _brace_depths(tokens: Sequence[Token]) -> Optional[List[int]]:
    """Return the brace depth before each token, or ``None`` when unbalanced."""

    depths: List[int] = []
    depth = 0
    for token in tokens:
        depths.append(depth)
        if token.text == "{":
            depth += 1
        elif token.text == "}":
            depth -= 1
            if depth < 0:
                return None
    return depths if depth == 0 else None


def _find_entry_point(tokens: Sequence[Token], depths: Sequence[int]) -> Optional[Tuple[int, str, bool]]:
    """Locate ``<ret> main(<type> <param>) {`` at file scope.

    Returns the index of the return-type token, the parameter name and
    whether the signature uses GLSL ``vec`` types.
    """

    for index in range(len(tokens) - 6):
        if depths[index] != 0 or tokens[index].text not in ENTRY_RETURN_TYPES:
            continue
        window = tokens[index + 1 : index + 7]
        if (
            window[0].text == "main"
            and window[1].text == "("
            and window[2].text in ENTRY_PARAM_TYPES
            and window[3].kind == "ident"
            and window[4].text == ")"
            and window[5].text == "{"
        ):
            glsl = tokens[index].text in _GLSL_TYPES or window[2].text in _GLSL_TYPES
            return index, window[3].text, glsl
    return None


def _morph_functions(glsl: bool) -> str:
    if not glsl:
        return MORPH_FUNCTIONS
    return re.sub(r"\bfloat([234])\b", r"vec\1", MORPH_FUNCTIONS)


def _matching_brace(tokens: Sequence[Token], open_index: int) -> int:
    depth = 0
    for index in range(open_index, len(tokens)):
        if tokens[index].text == "{":
            depth += 1
        elif tokens[index].text == "}":
            depth -= 1
            if depth == 0:
                return index
    raise ValueError("unbalanced braces")


def _uniform_statements(tokens: Sequence[Token], depths: Sequence[int], stop: int) -> List[Tuple[int, int]]:
    """Return ``(first, semicolon)`` index pairs of file-scope uniform declarations."""

    statements: List[Tuple[int, int]] = []
    index = 0
    while index < stop:
        if depths[index] == 0 and tokens[index].text == "uniform":
            end = index
            while end < stop and tokens[end].text != ";":
                end += 1
            if end >= stop:
                break
            statements.append((index, end))
            index = end
        index += 1
    return statements


def _line_end(source: str, offset: int) -> int:
    """Advance *offset* to the end of its line when only a trailing comment follows."""

    newline = source.find("\n", offset)
    stop = len(source) if newline == -1 else newline
    tail = source[offset:stop].strip()
    if not tail or tail.startswith("//"):
        return stop
    return offset


def _is_unit_literal(tokens: Sequence[Token]) -> bool:
    if len(tokens) != 1 or tokens[0].kind != "number":
        return False
    try:
        return float(tokens[0].text.rstrip("fFhH")) == 1.0
    except ValueError:
        return False


def _return_edits(source: str, tokens: Sequence[Token], body: range, param: str) -> List[_Edit]:
    """Rewrite the alpha argument of every vector-constructor return in *body*."""

    edits: List[_Edit] = []
    morph_alpha = f"getMorphAlpha({param}, u_resolution, u_morphProgress, u_morphDirection)"
    index = body.start
    while index < body.stop - 2:
        if not (
            tokens[index].text == "return"
            and tokens[index + 1].text in ENTRY_RETURN_TYPES
            and tokens[index + 2].text == "("
        ):
            index += 1
            continue

        constructor = tokens[index + 1].text
        depth = 0
        last_comma = None
        close = None
        for cursor in range(index + 2, body.stop):
            text = tokens[cursor].text
            if text in ("(", "["):
                depth += 1
            elif text in (")", "]"):
                depth -= 1
                if depth == 0:
                    close = cursor
                    break
            elif text == "," and depth == 1:
                last_comma = cursor

        if close is None:
            break
        if last_comma is None or close + 1 >= body.stop or tokens[close + 1].text != ";":
            index = close
            continue

        alpha_tokens = tokens[last_comma + 1 : close]
        if not alpha_tokens:
            index = close
            continue

        cast = _ALPHA_CAST[constructor]
        start, end = alpha_tokens[0].start, alpha_tokens[-1].end
        if _is_unit_literal(alpha_tokens):
            replacement = f"{cast}({morph_alpha})"
        else:
            alpha_text = source[start:end]
            replacement = f"{cast}(({alpha_text}) * {morph_alpha})"
        edits.append(_Edit(start, end, replacement))
        index = close
    return edits


def _apply(source: str, edits: Sequence[_Edit]) -> str:
    result = source
    for edit in sorted(edits, key=lambda item: item.start, reverse=True):
        result = result[: edit.start] + edit.text + result[edit.end :]
    return result


def wrap_with_morph(source: str) -> str:
    """Return *source* with a noise-masked morph alpha, or unchanged if unrecognised."""

    tokens = _significant(tokenize(source))

    if any(token.text == "u_morphProgress" for token in tokens):
        _LOGGER.debug("Shader already carries morph uniforms; leaving it unchanged")
        return source

    depths = _brace_depths(tokens)
    if depths is None:
        _LOGGER.warning("Morph wrap skipped: unbalanced braces")
        return source

    located = _find_entry_point(tokens, depths)
    if located is None:
        _LOGGER.warning("Morph wrap skipped: no recognisable entry point")
        return source
    entry_index, param, glsl = located

    open_index = entry_index + 6
    close_index = _matching_brace(tokens, open_index)
    edits = _return_edits(source, tokens, range(open_index + 1, close_index), param)
    if not edits:
        _LOGGER.warning("Morph wrap skipped: entry point has no rewritable return")
        return source
    rewritten = len(edits)

    uniforms = _uniform_statements(tokens, depths, entry_index)
    declared = {
        token.text
        for first, last in uniforms
        for token in tokens[first:last]
        if token.kind == "ident"
    }
    new_uniforms = list(MORPH_UNIFORMS)
    if "u_resolution" not in declared:
        new_uniforms.insert(0, f"uniform {'vec2' if glsl else 'float2'} u_resolution;")

    functions = _morph_functions(glsl)
    entry_start = tokens[entry_index].start
    if uniforms:
        anchor = _line_end(source, tokens[uniforms[-1][1]].end)
        edits.append(_Edit(anchor, anchor, "".join("\n" + line for line in new_uniforms)))
        edits.append(_Edit(entry_start, entry_start, functions + "\n"))
    else:
        block = "\n".join(new_uniforms) + "\n\n" + functions + "\n"
        edits.append(_Edit(entry_start, entry_start, block))

    _LOGGER.debug("Morph wrap applied (%d return statements rewritten)", rewritten)
    return _apply(source, edits)


__all__ = ["MORPH_DEFAULTS", "MORPH_FUNCTIONS", "MORPH_UNIFORMS", "Token", "tokenize", "wrap_with_morph"]
