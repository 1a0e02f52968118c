"""Noise fragments shared by every generated shader."""

from __future__ import annotations

from typing import Dict, Tuple, Union

from vibeshaders.types import NoiseType

SIMPLEX_NOISE = """
// ============================================
// SIMPLEX NOISE (2D)
// ============================================

float3 mod289_3(float3 x) {
  return x - floor(x * (1.0 / 289.0)) * 289.0;
}

float2 mod289_2(float2 x) {
  return x - floor(x * (1.0 / 289.0)) * 289.0;
}

float3 permute(float3 x) {
  return mod289_3(((x * 34.0) + 1.0) * x);
}

float snoise(float2 v) {
  const float4 C = float4(
    0.211324865405187,
    0.366025403784439,
    -0.577350269189626,
    0.024390243902439
  );

  float2 i = floor(v + dot(v, C.yy));
  float2 x0 = v - i + dot(i, C.xx);

  float2 i1 = (x0.x > x0.y) ? float2(1.0, 0.0) : float2(0.0, 1.0);
  float4 x12 = x0.xyxy + C.xxzz;
  x12.xy -= i1;

  i = mod289_2(i);
  float3 p = permute(permute(i.y + float3(0.0, i1.y, 1.0))
                    + i.x + float3(0.0, i1.x, 1.0));

  float3 m = max(0.5 - float3(dot(x0, x0), dot(x12.xy, x12.xy), dot(x12.zw, x12.zw)), 0.0);
  m = m * m;
  m = m * m;

  float3 x = 2.0 * fract(p * C.www) - 1.0;
  float3 h = abs(x) - 0.5;
  float3 ox = floor(x + 0.5);
  float3 a0 = x - ox;

  m *= 1.79284291400159 - 0.85373472095314 * (a0 * a0 + h * h);

  float3 g;
  g.x = a0.x * x0.x + h.x * x0.y;
  g.yz = a0.yz * x12.xz + h.yz * x12.yw;
  return 130.0 * dot(m, g);
}
"""

HASH_NOISE = """
// ============================================
// HASH VALUE NOISE
// ============================================

float hash(float2 p) {
  return fract(sin(dot(p, float2(127.1, 311.7))) * 43758.5453);
}

float noise(float2 p) {
  float2 i = floor(p);
  float2 f = fract(p);
  f = f * f * (3.0 - 2.0 * f);

  return mix(
    mix(hash(i), hash(i + float2(1.0, 0.0)), f.x),
    mix(hash(i + float2(0.0, 1.0)), hash(i + float2(1.0, 1.0)), f.x),
    f.y
  );
}
"""

# Loop bounds are literals; the octave count only gates an early break.
FBM_SIMPLEX = """
// ============================================
// FRACTAL BROWNIAN MOTION (simplex)
// ============================================

float fbm(float2 p, float octaves) {
  float value = 0.0;
  float amplitude = 0.5;
  float frequency = 1.0;
  float maxValue = 0.0;

  for (float i = 0.0; i < 5.0; i += 1.0) {
    if (i >= octaves) break;
    value += amplitude * snoise(p * frequency);
    maxValue += amplitude;
    amplitude *= 0.5;
    frequency *= 2.0;
  }

  return value / maxValue;
}
"""

FBM_HASH = """
// ============================================
// FRACTAL BROWNIAN MOTION (hash)
// ============================================

float fbm(float2 p, int octaves) {
  float value = 0.0;
  float amplitude = 0.5;
  float frequency = 1.0;

  for (int i = 0; i < 6; i++) {
    if (i >= octaves) break;
    value += amplitude * noise(p * frequency);
    frequency *= 2.0;
    amplitude *= 0.5;
  }
  return value;
}
"""

TURBULENCE = """
// ============================================
// TURBULENCE
// ============================================

float turbulence(float2 p, float octaves) {
  float value = 0.0;
  float amplitude = 1.0;
  float frequency = 1.0;
  float maxValue = 0.0;

  for (float i = 0.0; i < 6.0; i += 1.0) {
    if (i >= octaves) break;
    value += amplitude * abs(snoise(p * frequency));
    maxValue += amplitude;
    amplitude *= 0.5;
    frequency *= 2.0;
  }

  return value / maxValue;
}
"""

# Function names each fragment defines; effect helpers must not reuse them.
NOISE_FUNCTION_NAMES: Tuple[str, ...] = (
    "mod289_3",
    "mod289_2",
    "permute",
    "snoise",
    "hash",
    "noise",
    "fbm",
    "turbulence",
)

_NOISE_FRAGMENTS: Dict[NoiseType, Tuple[str, ...]] = {
    NoiseType.SIMPLEX: (SIMPLEX_NOISE, FBM_SIMPLEX),
    NoiseType.HASH: (HASH_NOISE, FBM_HASH),
    NoiseType.BOTH: (SIMPLEX_NOISE, HASH_NOISE, FBM_SIMPLEX),
}


def get_noise_code(noise_type: Union[NoiseType, str]) -> str:
    """Return the noise source for *noise_type*.

    ``both`` carries simplex and hash noise but only the simplex fBM, so no
    function is defined twice. Raises ``ValueError`` for an unknown tag.
    """

    kind = NoiseType(noise_type)
    return "".join(_NOISE_FRAGMENTS[kind])


__all__ = [
    "SIMPLEX_NOISE",
    "HASH_NOISE",
    "FBM_SIMPLEX",
    "FBM_HASH",
    "TURBULENCE",
    "NOISE_FUNCTION_NAMES",
    "get_noise_code",
]
