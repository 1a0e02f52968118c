"""Surface effects: marble veins, stippling and ink washes."""

from __future__ import annotations

from vibeshaders.effects.base import EffectDefinition

# marbleVein calls turbulence(), which the composer injects on request.
LIQUID_MARBLE = EffectDefinition(
    helpers="""
// ============================================
// MARBLE VEINS
// ============================================

float marbleVein(float2 uv, float time, float octaves) {
  float angle = time * 0.1;
  float c = cos(angle);
  float s = sin(angle);
  float2 rotUV = float2(c * uv.x - s * uv.y, s * uv.x + c * uv.y);

  float basePattern = sin(rotUV.x * 3.0 + rotUV.y * 2.0 + time * 0.5);
  float turb = turbulence(uv * 2.0 + time * 0.1, octaves);
  float vein = sin(basePattern * 3.14159 + turb * 4.0);
  vein = abs(vein);
  vein = pow(vein, 0.5);

  return vein;
}

float2 flowDistort(float2 uv, float time) {
  float2 result = uv;
  result.x += sin(uv.y * 2.0 + time * 0.3) * 0.1;
  result.y += cos(uv.x * 2.0 + time * 0.25) * 0.08;
  float n = snoise(uv * 1.5 + time * 0.2);
  result += float2(n * 0.05, n * 0.04);
  return result;
}
""",
    main="""
  float octaves = 2.0 + u_complexity * 3.0;

  float2 flowUV = flowDistort(uv, time);

  float vein1 = marbleVein(flowUV * 1.5, time, octaves);
  float vein2 = marbleVein(flowUV * 2.5 + 10.0, time * 0.8, octaves * 0.7);
  float vein3 = marbleVein(flowUV * 0.8 - 5.0, time * 1.2, octaves * 0.5);

  float veins = vein1 * 0.5 + vein2 * 0.3 + vein3 * 0.2;

  float n1 = fbm(flowUV * 3.0 + time * 0.3, octaves);
  float n2 = fbm(flowUV * 2.0 - time * 0.2, octaves * 0.6);
  n1 = n1 * 0.5 + 0.5;
  n2 = n2 * 0.5 + 0.5;

  half3 color = half3(COLOR_NAVY);
  color = mix(color, half3(COLOR_CREAM), half(veins * 0.6));

  float goldMask = smoothstep(0.4, 0.6, n1) * smoothstep(0.3, 0.7, veins);
  color = mix(color, half3(COLOR_GOLD), half(goldMask * 0.5));

  float roseMask = smoothstep(0.5, 0.8, n2) * (1.0 - veins * 0.5);
  color = mix(color, half3(COLOR_ROSE), half(roseMask * 0.3));

  float depth = 1.0 - veins * 0.3;
  color *= half(depth);

  // Gold shimmer
  float shimmer = sin(flowUV.x * 20.0 + time * 3.0) * sin(flowUV.y * 20.0 - time * 2.5);
  shimmer = shimmer * 0.5 + 0.5;
  shimmer = pow(shimmer, 4.0);
  color += half3(COLOR_GOLD) * half(shimmer * goldMask * 0.15);

  color = pow(color, half3(0.98));
""",
    requires_turbulence=True,
)

STIPPLED = EffectDefinition(
    helpers="""
// ============================================
// STIPPLE
// ============================================

float stipple(float2 uv, float density, float time) {
  float2 grid = floor(uv * density);
  float2 local = fract(uv * density);

  float randVal = hash(grid + floor(time * 0.5));
  float threshold = fbm(uv * 2.0 + time * 0.1, 2) * 0.5 + 0.5;

  float dotMask = smoothstep(0.4, 0.2, length(local - 0.5));
  return dotMask * step(threshold, randVal + 0.3);
}
""",
    main="""
  float gradient = uv.y + fbm(uv * 2.0 + time * 0.1, 3) * 0.3;

  float stip1 = stipple(uv, 50.0, time);
  float stip2 = stipple(uv + 0.1, 35.0, time * 0.8);
  float stip3 = stipple(uv - 0.1, 70.0, time * 1.2);

  float totalStipple = stip1 * 0.5 + stip2 * 0.3 + stip3 * 0.2;

  float3 color1 = float3(0.1, 0.15, 0.25);
  float3 color2 = float3(0.25, 0.4, 0.5);
  float3 color3 = float3(0.5, 0.65, 0.6);

  float3 baseColor = mix(color1, color2, smoothstep(0.0, 0.5, gradient));
  baseColor = mix(baseColor, color3, smoothstep(0.5, 1.0, gradient));

  float3 stippleColor = mix(baseColor * 0.7, baseColor * 1.3, totalStipple);
  baseColor = mix(baseColor, stippleColor, 0.6);

  float n = fbm(uv * 8.0 - time * 0.15, 2);
  n = n * 0.5 + 0.5;
  baseColor = mix(baseColor, baseColor * (0.8 + n * 0.4), 0.3);

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

INK_BLOOM = EffectDefinition(
    helpers="""
// ============================================
// INK SPREAD
// ============================================

float inkSpread(float2 uv, float2 origin, float time, float speed) {
  float2 delta = uv - origin;
  float dist = length(delta);

  float expansion = time * speed;
  float ring = smoothstep(expansion - 0.1, expansion, dist) *
               smoothstep(expansion + 0.3, expansion, dist);

  // Ragged edges
  float n = fbm(delta * 5.0 + time * 0.5, 3.0);
  ring *= smoothstep(-0.3, 0.3, n);

  return ring;
}

float inkCloud(float2 uv, float time) {
  float total = 0.0;

  float2 o1 = float2(0.3, 0.4);
  float2 o2 = float2(0.7, 0.6);
  float2 o3 = float2(0.5, 0.3);

  total += inkSpread(uv, o1, time, 0.1);
  total += inkSpread(uv, o2, time * 0.8 + 0.5, 0.08);
  total += inkSpread(uv, o3, time * 1.2 + 1.0, 0.12);

  float n = fbm(uv * 3.0 + time * 0.05, 4.0);
  n = smoothstep(0.4, 0.6, n * 0.5 + 0.5);
  total += n * 0.5;

  return min(total, 1.0);
}
""",
    main="""
  float ink = inkCloud(uv, time);

  float n1 = fbm(uv * 4.0 + time * 0.1, 3.0);
  float n2 = fbm(uv * 6.0 - time * 0.15, 2.0);
  n1 = n1 * 0.5 + 0.5;
  n2 = n2 * 0.5 + 0.5;

  float3 paperColor = float3(0.95, 0.93, 0.9);
  float3 inkColor = float3(0.1, 0.08, 0.15);
  float3 inkEdge = float3(0.3, 0.25, 0.35);
  float3 tintColor = float3(0.2, 0.15, 0.3);

  float3 baseColor = paperColor;

  float edge = smoothstep(0.1, 0.4, ink) * (1.0 - smoothstep(0.4, 0.7, ink));
  baseColor = mix(baseColor, inkEdge, edge);
  baseColor = mix(baseColor, inkColor, smoothstep(0.4, 0.7, ink));
  baseColor = mix(baseColor, tintColor, n1 * ink * 0.3);

  // Paper grain
  float paperTex = noise(uv * 50.0) * 0.1;
  baseColor = mix(baseColor, baseColor * (1.0 - paperTex), 1.0 - ink);

  float wetEdge = smoothstep(0.3, 0.5, ink) * smoothstep(0.6, 0.4, ink);
  baseColor *= 1.0 - wetEdge * 0.2;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

__all__ = ["LIQUID_MARBLE", "STIPPLED", "INK_BLOOM"]
