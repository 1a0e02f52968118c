"""Rotational effects: vortices, polar spirals, kaleidoscopes and radial flow."""

from __future__ import annotations

from vibeshaders.effects.base import EffectDefinition

MULTI_SWIRL = EffectDefinition(
    helpers="""
// ============================================
// MULTI-SWIRL
// ============================================

float2 multiSwirl(float2 uv, float time) {
  float2 result = uv;

  float2 center1 = float2(0.3 + sin(time * 0.15) * 0.4, 0.4 + cos(time * 0.2) * 0.3);
  float2 center2 = float2(0.7 + cos(time * 0.18) * 0.3, 0.6 + sin(time * 0.12) * 0.4);
  float2 center3 = float2(0.5 + sin(time * 0.22) * 0.35, 0.3 + cos(time * 0.16) * 0.35);
  float2 center4 = float2(0.4 + cos(time * 0.14) * 0.3, 0.7 + sin(time * 0.19) * 0.3);

  for (int i = 0; i < 4; i++) {
    float2 center;
    float strength;
    float dir;

    if (i == 0) { center = center1; strength = 1.5; dir = 1.0; }
    else if (i == 1) { center = center2; strength = 1.2; dir = -1.0; }
    else if (i == 2) { center = center3; strength = 1.8; dir = 1.0; }
    else { center = center4; strength = 1.0; dir = -1.0; }

    float2 delta = result - center;
    float dist = length(delta);
    float angle = dir * strength / (dist + 0.3) + time * 0.3 * dir;
    float c = cos(angle);
    float s = sin(angle);

    float influence = smoothstep(0.8, 0.0, dist);
    float2 swirled = float2(c * delta.x - s * delta.y, s * delta.x + c * delta.y) + center;
    result = mix(result, swirled, influence * 0.6);
  }

  return result;
}
""",
    main="""
  float octaves = 1.0 + u_complexity * 4.0;

  float2 swirledUV = multiSwirl(uv, time);

  float2 jitter = float2(
    snoise(swirledUV * 3.0 + time * 0.5),
    snoise(swirledUV * 3.0 + time * 0.5 + 100.0)
  );
  swirledUV += jitter * 0.08;

  float n1 = fbm(swirledUV * 2.5, octaves);
  float n2 = fbm(swirledUV * 1.5 + time, octaves * 0.7);
  float n3 = fbm(swirledUV * 4.0 - time * 0.5, octaves * 0.5);

  n1 = n1 * 0.5 + 0.5;
  n2 = n2 * 0.5 + 0.5;
  n3 = n3 * 0.5 + 0.5;

  half3 color = mix(half3(COLOR_RED), half3(COLOR_ORANGE), half(n1));
  color = mix(color, half3(COLOR_YELLOW), half(n2 * 0.6));
  color = mix(color, half3(COLOR_MAGENTA), half(n3 * 0.4));

  color = pow(color, half3(0.95));
""",
)

AURORA_SPIRALS = EffectDefinition(
    helpers="""
// ============================================
// POLAR SPIRAL DISTORTION
// ============================================

float2 polarSpiral(float2 uv, float2 center, float time) {
  float2 delta = uv - center;
  float dist = length(delta);
  float angle = atan(delta.y, delta.x);

  float spiral = angle + dist * 3.0 - time * 0.8;
  float wave1 = sin(spiral * 4.0 + time) * 0.15;
  float wave2 = sin(dist * 8.0 - time * 1.2) * 0.1;

  float newDist = dist + wave1 + wave2;
  float newAngle = angle + sin(dist * 5.0 + time * 0.5) * 0.3;

  return center + float2(cos(newAngle), sin(newAngle)) * newDist;
}

// ============================================
// AURORA BANDS
// ============================================

float auroraBands(float2 uv, float time) {
  float bands = 0.0;
  bands += sin(uv.y * 6.0 + uv.x * 2.0 + time * 0.8) * 0.5 + 0.5;
  bands += sin(uv.y * 4.0 - uv.x * 3.0 + time * 0.6) * 0.3;
  bands += sin(uv.x * 5.0 + uv.y * 1.5 + time * 1.1) * 0.2;
  return bands;
}
""",
    main="""
  float octaves = 1.0 + u_complexity * 4.0;
  float2 center = float2(0.5 * aspect, 0.5);

  float2 spiralUV = polarSpiral(uv, center, time);

  float noiseDisp = snoise(spiralUV * 2.0 + time * 0.3);
  spiralUV += float2(noiseDisp * 0.1, noiseDisp * 0.08);

  float bands = auroraBands(spiralUV, time);

  float n1 = fbm(spiralUV * 2.0, octaves);
  float n2 = fbm(spiralUV * 3.0 + time * 0.5, octaves * 0.6);
  n1 = n1 * 0.5 + 0.5;
  n2 = n2 * 0.5 + 0.5;

  float distFromCenter = length(uv - center);

  half3 color = mix(half3(COLOR_PINK), half3(COLOR_BLUE), half(n1));
  color = mix(color, half3(COLOR_CYAN), half(bands * 0.5));
  color = mix(color, half3(COLOR_PURPLE), half(n2 * 0.4));

  // Glow at band peaks
  float glow = pow(bands, 2.0) * 0.3;
  color += half3(glow * 0.5, glow * 0.8, glow);

  color = pow(color, half3(0.95));

  float radialFade = 1.0 - smoothstep(0.3, 0.8, distFromCenter);
  color *= half(0.7 + 0.3 * radialFade);
""",
)

KALEIDOSCOPE = EffectDefinition(
    helpers="""
// ============================================
// KALEIDOSCOPE TRANSFORM
// ============================================

float2 kaleidoscope(float2 uv, float2 center, int segments, float rotation) {
  float2 delta = uv - center;
  float dist = length(delta);
  float angle = atan(delta.y, delta.x) + rotation;

  float segmentAngle = 3.14159 * 2.0 / float(segments);
  angle = mod(angle, segmentAngle);

  if (mod(floor(atan(delta.y, delta.x) / segmentAngle), 2.0) > 0.5) {
    angle = segmentAngle - angle;
  }

  return float2(cos(angle), sin(angle)) * dist + center;
}

// ============================================
// BLOOM PETALS
// ============================================

float petalPattern(float2 uv, float2 center, float time, int petals) {
  float2 delta = uv - center;
  float dist = length(delta);
  float angle = atan(delta.y, delta.x);

  float petal = sin(angle * float(petals) + time * 0.5) * 0.5 + 0.5;
  float radial = 1.0 - smoothstep(0.0, 0.4 + petal * 0.2, dist);
  float ring = smoothstep(0.1, 0.15, dist) * (1.0 - smoothstep(0.2, 0.25, dist));

  return radial * petal + ring * 0.3;
}
""",
    main="""
  float octaves = 2.0 + u_complexity * 3.0;
  float2 center = float2(0.5 * aspect, 0.5);
  int segments = 6 + int(u_complexity * 4.0);
  float rotation = time * 0.3;

  float2 kaleUV = kaleidoscope(uv, center, segments, rotation);

  float noiseOffset = snoise(kaleUV * 3.0 + time * 0.5) * 0.05;
  kaleUV += float2(noiseOffset);

  float petals1 = petalPattern(kaleUV, center, time, 5);
  float petals2 = petalPattern(kaleUV * 1.5, center * 1.5, time * 1.3, 7);
  float petals3 = petalPattern(kaleUV * 0.7, center * 0.7, time * 0.7, 3);

  float pattern = petals1 * 0.5 + petals2 * 0.3 + petals3 * 0.2;

  float n1 = fbm(kaleUV * 2.0 + time * 0.2, octaves);
  float n2 = fbm(kaleUV * 3.0 - time * 0.15, octaves * 0.7);
  n1 = n1 * 0.5 + 0.5;
  n2 = n2 * 0.5 + 0.5;

  float distFromCenter = length(uv - center);

  half3 color = mix(half3(COLOR_VIOLET), half3(COLOR_FUCHSIA), half(n1));
  color = mix(color, half3(COLOR_CORAL), half(pattern * 0.6));
  color = mix(color, half3(COLOR_PEACH), half(n2 * 0.4));

  float radialGradient = 1.0 - smoothstep(0.0, 0.6, distFromCenter);
  color = mix(color, half3(COLOR_FUCHSIA), half(radialGradient * 0.3));

  float bloom = pow(pattern, 2.0) * 0.4;
  color += half3(0.4, 0.2, 0.3) * half(bloom);

  // Spiral overlay
  float2 delta = uv - center;
  float angle = atan(delta.y, delta.x);
  float spiral = sin(angle * 3.0 + distFromCenter * 8.0 - time * 2.0) * 0.5 + 0.5;
  color = mix(color, color * 1.2, half(spiral * 0.2));

  float pulse = sin(time * 3.0) * 0.5 + 0.5;
  color *= half(0.9 + pulse * 0.1);

  color = pow(color, half3(0.95));
""",
)

RADIAL_FLOW = EffectDefinition(
    helpers="""
// ============================================
// RADIAL FLOW FIELD
// ============================================

float2 radialFlow(float2 uv, float2 center, float time) {
  float2 delta = uv - center;
  float dist = length(delta);
  float angle = atan(delta.y, delta.x);

  float flowAngle = angle + dist * 2.0 + time * 0.3;
  float radialStrength = smoothstep(0.0, 0.5, dist) * smoothstep(1.0, 0.3, dist);

  return float2(cos(flowAngle), sin(flowAngle)) * radialStrength * 0.1;
}

float flowLines(float2 uv, float2 center, float time) {
  float2 delta = uv - center;
  float dist = length(delta);
  float angle = atan(delta.y, delta.x);

  float lines = sin(angle * 8.0 + dist * 15.0 - time * 2.0);
  lines = smoothstep(-0.2, 0.2, lines);

  return lines * smoothstep(0.8, 0.1, dist);
}
""",
    main="""
  float2 center = float2(0.5 * aspect, 0.5);

  float2 flow = radialFlow(uv, center, time);
  float2 flowedUV = uv + flow;

  float dist = length(uv - center);

  float depth = fbm(flowedUV * 3.0 + time * 0.1, 4.0);
  float3 baseColor = mix(float3(0.02, 0.05, 0.12), float3(0.08, 0.18, 0.28), depth);

  float lines = flowLines(flowedUV, center, time);
  baseColor = mix(baseColor, float3(0.15, 0.35, 0.45), lines * 0.5);

  float centerGlow = exp(-dist * 3.0);
  baseColor += float3(0.1, 0.25, 0.35) * centerGlow;

  float n = fbm(flowedUV * 5.0 - time * 0.15, 3.0);
  n = n * 0.5 + 0.5;
  baseColor = mix(baseColor, float3(0.12, 0.28, 0.38), n * 0.3);

  // Drifting particles
  float particles = fbm(uv * 20.0 + time * 0.3, 2.0);
  particles = smoothstep(0.7, 0.9, particles);
  baseColor += float3(0.2, 0.4, 0.5) * particles * 0.2;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

__all__ = ["MULTI_SWIRL", "AURORA_SPIRALS", "KALEIDOSCOPE", "RADIAL_FLOW"]
