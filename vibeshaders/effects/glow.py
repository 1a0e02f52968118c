"""Luminous effects: metaballs, blooms, nebulae and aurora curtains."""

from __future__ import annotations

from vibeshaders.effects.base import EffectDefinition

METABALLS = EffectDefinition(
    helpers="""
// ============================================
// METABALLS
// ============================================

float metaball(float2 uv, float2 center, float radius) {
  float dist = length(uv - center);
  return radius / (dist * dist + 0.01);
}

float metaballs(float2 uv, float time) {
  float total = 0.0;

  float2 c1 = float2(0.3 + sin(time * 0.3) * 0.2, 0.4 + cos(time * 0.4) * 0.2);
  float2 c2 = float2(0.7 + cos(time * 0.35) * 0.2, 0.5 + sin(time * 0.45) * 0.2);
  float2 c3 = float2(0.5 + sin(time * 0.5) * 0.15, 0.7 + cos(time * 0.3) * 0.15);
  float2 c4 = float2(0.4 + cos(time * 0.4) * 0.18, 0.3 + sin(time * 0.5) * 0.18);
  float2 c5 = float2(0.6 + sin(time * 0.25) * 0.22, 0.6 + cos(time * 0.35) * 0.22);

  total += metaball(uv, c1, 0.015);
  total += metaball(uv, c2, 0.012);
  total += metaball(uv, c3, 0.018);
  total += metaball(uv, c4, 0.01);
  total += metaball(uv, c5, 0.014);

  return total;
}
""",
    main="""
  float meta = metaballs(uv, time);

  // Blob edge thresholds
  float edge = smoothstep(0.8, 1.2, meta);
  float inner = smoothstep(1.2, 2.0, meta);

  float3 bgColor = float3(0.05, 0.08, 0.15);
  float3 blobColor = float3(0.2, 0.5, 0.7);
  float3 coreColor = float3(0.4, 0.8, 0.9);

  float3 baseColor = bgColor;
  baseColor = mix(baseColor, blobColor, edge);
  baseColor = mix(baseColor, coreColor, inner);

  float n = fbm(uv * 5.0 + time * 0.2, 3.0);
  n = n * 0.5 + 0.5;
  baseColor = mix(baseColor, baseColor * 1.2, n * edge * 0.3);

  float glow = smoothstep(0.5, 0.8, meta) * (1.0 - edge);
  baseColor += float3(0.1, 0.2, 0.3) * glow;

  float shimmer = sin(meta * 10.0 + time * 3.0) * 0.5 + 0.5;
  baseColor += float3(0.1, 0.15, 0.2) * shimmer * inner * 0.3;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

CHROMATIC_BLOOM = EffectDefinition(
    helpers="""
// ============================================
// RADIAL BLOOM
// ============================================

float bloom(float2 uv, float2 center, float time) {
  float dist = length(uv - center);

  float pulse = sin(time * 2.0) * 0.1 + 0.9;
  float core = exp(-dist * 4.0 * pulse);
  float glow = exp(-dist * 1.5) * 0.6;

  float n = fbm(uv * 3.0 + time * 0.2, 3.0) * 0.5 + 0.5;

  return core + glow * n;
}
""",
    main="""
  float2 center = float2(0.5 * aspect, 0.5);
  float dist = length(uv - center);
  float2 dir = normalize(uv - center + 0.0001);

  // Chromatic aberration
  float aberration = dist * 0.03 * (1.0 + sin(time) * 0.3);

  float2 uvR = uv + dir * aberration;
  float2 uvG = uv;
  float2 uvB = uv - dir * aberration;

  float bloomR = bloom(uvR, center, time);
  float bloomG = bloom(uvG, center, time * 1.1);
  float bloomB = bloom(uvB, center, time * 0.9);

  // Orbiting secondary blooms
  float2 orbit1 = center + float2(sin(time * 0.5) * 0.2, cos(time * 0.6) * 0.15);
  float2 orbit2 = center + float2(cos(time * 0.4) * 0.18, sin(time * 0.5) * 0.22);

  bloomR += bloom(uvR, orbit1, time) * 0.4 + bloom(uvR, orbit2, time) * 0.3;
  bloomG += bloom(uvG, orbit1, time * 1.1) * 0.4 + bloom(uvG, orbit2, time * 1.1) * 0.3;
  bloomB += bloom(uvB, orbit1, time * 0.9) * 0.4 + bloom(uvB, orbit2, time * 0.9) * 0.3;

  half3 color;
  color.r = half(bloomR * 0.7);
  color.g = half(bloomG * 0.65);
  color.b = half(bloomB * 0.75);

  float edgeRainbow = smoothstep(0.1, 0.4, dist) * smoothstep(0.7, 0.3, dist);
  float rainbowAngle = atan(dir.y, dir.x) + time * 0.5;

  half3 rainbow;
  rainbow.r = half(sin(rainbowAngle) * 0.5 + 0.5);
  rainbow.g = half(sin(rainbowAngle + 2.094) * 0.5 + 0.5);
  rainbow.b = half(sin(rainbowAngle + 4.189) * 0.5 + 0.5);

  color += rainbow * half(edgeRainbow * 0.3);

  // White-hot core
  float coreIntensity = exp(-dist * 8.0);
  color += half3(1.0, 0.98, 0.95) * half(coreIntensity * 0.25);

  float bg = 1.0 - smoothstep(0.0, 0.8, dist);
  color *= half(0.3 + bg * 0.7);

  float grain = fbm(uv * 10.0, 2.0) * 0.05;
  color += half(grain * 0.3);

  color = pow(color, half3(0.95));
""",
)

BREATHING_NEBULA = EffectDefinition(
    helpers="""
// ============================================
// BREATHING PULSE
// ============================================

float breathe(float time, float rate) {
  return (sin(time * rate) * 0.5 + 0.5);
}

// ============================================
// NEBULA CLOUD
// ============================================

float nebulaCloud(float2 uv, float time) {
  float2 p = uv * 2.0;

  float breath = breathe(time, 0.5);
  float scale = 1.0 + breath * 0.2;

  p *= scale;
  p += float2(sin(time * 0.2), cos(time * 0.15)) * 0.3;

  float n1 = fbm(p, 4.0);
  float n2 = fbm(p * 1.5 + 50.0, 3.0);
  float n3 = fbm(p * 0.7 - time * 0.1, 5.0);

  return (n1 + n2 * 0.5 + n3 * 0.3) / 1.8;
}
""",
    main="""
  float cloud = nebulaCloud(uv, time);
  cloud = cloud * 0.5 + 0.5;

  float breath = breathe(time, 0.5);

  float3 darkColor = float3(0.02, 0.03, 0.08);
  float3 midColor = float3(0.15, 0.1, 0.25);
  float3 brightColor = float3(0.4, 0.2, 0.5);
  float3 accentColor = float3(0.6, 0.3, 0.4);

  float3 baseColor = darkColor;
  baseColor = mix(baseColor, midColor, smoothstep(0.3, 0.5, cloud));
  baseColor = mix(baseColor, brightColor, smoothstep(0.5, 0.7, cloud));
  baseColor = mix(baseColor, accentColor, smoothstep(0.7, 0.9, cloud) * 0.5);

  baseColor *= 0.8 + breath * 0.4;

  // Stars
  float stars = noise(uv * 100.0);
  stars = smoothstep(0.97, 1.0, stars);
  baseColor += float3(1.0, 0.95, 0.9) * stars * (1.0 - cloud * 0.5);

  float2 center = float2(0.5 * aspect, 0.5);
  float dist = length(uv - center);
  float edgeGlow = smoothstep(0.6, 0.2, dist) * breath;
  baseColor += float3(0.2, 0.1, 0.3) * edgeGlow * 0.3;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

AURORA_CURTAINS = EffectDefinition(
    helpers="""
// ============================================
// AURORA CURTAINS
// ============================================

float curtainWave(float2 uv, float time, float freq, float speed) {
  float wave = sin(uv.x * freq + time * speed + fbm(uv * 2.0, 2.0) * 2.0);
  wave += sin(uv.x * freq * 0.5 - time * speed * 0.7) * 0.5;
  return wave * 0.5 + 0.5;
}

float auroraCurtain(float2 uv, float time) {
  float c1 = curtainWave(uv, time, 3.0, 0.5);
  float c2 = curtainWave(uv + 0.3, time * 0.8, 4.0, 0.3);
  float c3 = curtainWave(uv - 0.2, time * 1.2, 2.0, 0.7);

  // Vertical curtain shape
  float vGrad = smoothstep(0.0, 0.3, uv.y) * smoothstep(1.0, 0.5, uv.y);

  return (c1 * 0.5 + c2 * 0.3 + c3 * 0.2) * vGrad;
}
""",
    main="""
  float curtain = auroraCurtain(uv, time);

  float n1 = fbm(uv * 3.0 + time * 0.1, 3.0);
  float n2 = fbm(uv * 5.0 - time * 0.15, 2.0);
  n1 = n1 * 0.5 + 0.5;
  n2 = n2 * 0.5 + 0.5;

  float3 deepColor = float3(0.02, 0.05, 0.1);
  float3 oceanColor = float3(0.05, 0.15, 0.25);
  float3 auroraGreen = float3(0.2, 0.6, 0.4);
  float3 auroraCyan = float3(0.15, 0.5, 0.6);
  float3 auroraPurple = float3(0.3, 0.2, 0.5);

  float3 baseColor = mix(deepColor, oceanColor, uv.y);

  baseColor = mix(baseColor, auroraGreen, curtain * n1 * 0.6);
  baseColor = mix(baseColor, auroraCyan, curtain * n2 * 0.4);
  baseColor = mix(baseColor, auroraPurple, curtain * (1.0 - n1) * 0.3);

  float shimmer = sin(uv.y * 30.0 + time * 2.0) * 0.5 + 0.5;
  shimmer *= curtain;
  baseColor += float3(0.1, 0.2, 0.15) * shimmer * 0.2;

  // Stars in the dark gaps
  float stars = noise(uv * 100.0);
  stars = smoothstep(0.97, 1.0, stars);
  baseColor += float3(1.0, 0.95, 0.9) * stars * (1.0 - curtain * 0.8);

  float flow = sin(uv.y * 20.0 + time + n1 * 3.0);
  flow = smoothstep(0.8, 1.0, flow * 0.5 + 0.5);
  baseColor += auroraCyan * flow * curtain * 0.15;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

__all__ = ["METABALLS", "CHROMATIC_BLOOM", "BREATHING_NEBULA", "AURORA_CURTAINS"]
