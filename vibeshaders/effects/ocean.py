"""Water and field effects: shoreline streams, orbs and magnetic lines."""

from __future__ import annotations

from vibeshaders.effects.base import EffectDefinition

FLOWING_STREAMS = EffectDefinition(
    helpers="""
// ============================================
// FLUID FLOW
// ============================================

float2 fluidFlow(float2 uv, float time) {
  float2 flow = float2(
    fbm(uv * 2.0 + time * 0.2, 3),
    fbm(uv * 2.0 + float2(50.0, 0.0) - time * 0.15, 3)
  );
  return flow * 0.3;
}

// ============================================
// MARBLE SWIRL
// ============================================

float marbleSwirl(float2 uv, float time) {
  float2 p = uv * 3.0;

  float angle = fbm(p + time * 0.1, 3) * 6.28;
  p += float2(cos(angle), sin(angle)) * 0.3;

  float swirl = sin(p.x * 2.0 + fbm(p * 2.0, 4) * 4.0 + time * 0.3);
  swirl += sin(p.y * 1.5 + fbm(p * 1.5 + 100.0, 4) * 3.0 - time * 0.2);

  return swirl * 0.5 + 0.5;
}
""",
    main="""
  float complexity = mix(0.6, 1.4, u_complexity);

  float2 flowedUV = uv + fluidFlow(uv, time);

  // Shore gradient
  float shoreGrad = uv.x * 0.4 + uv.y * 0.6;
  shoreGrad += fbm(flowedUV * 2.0 + time * 0.1, 4) * 0.3;

  float swirl = marbleSwirl(flowedUV, time);

  float waterZone = smoothstep(0.3, 0.5, shoreGrad);
  float sandZone = smoothstep(0.5, 0.7, shoreGrad);
  float lavenderZone = smoothstep(0.15, 0.35, shoreGrad) * (1.0 - waterZone);

  float3 baseColor = float3(DEEP_BLUE);
  baseColor = mix(baseColor, float3(TURQUOISE), waterZone * swirl);
  baseColor = mix(baseColor, float3(LAVENDER), lavenderZone * (1.0 - swirl) * 0.7);

  float sandMix = sandZone * fbm(flowedUV * 5.0, 3);
  baseColor = mix(baseColor, float3(SAND), sandMix);

  float veins = fbm(flowedUV * 8.0 + time * 0.15, 4);
  veins = smoothstep(0.4, 0.6, veins);
  baseColor = mix(baseColor, float3(TURQUOISE), veins * waterZone * 0.35);
  baseColor = mix(baseColor, float3(LAVENDER) * 0.9, veins * lavenderZone * 0.3);

  // Foam along the shoreline
  float foam = fbm(flowedUV * 15.0 + time * 0.2, 3);
  foam = smoothstep(0.65, 0.85, foam);
  float foamMask = abs(shoreGrad - 0.5) < 0.15 ? 1.0 : 0.0;
  foamMask *= smoothstep(0.0, 0.1, abs(shoreGrad - 0.5));
  baseColor = mix(baseColor, float3(FOAM), foam * foamMask * 0.6 * complexity);

  float tex = fbm(uv * 30.0, 2) * 0.05;
  baseColor += tex * 0.5;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

# Orb layers are unrolled through a literal-bounded loop.
LAYERED_ORBS = EffectDefinition(
    helpers="""
// ============================================
// ORB LAYERS
// ============================================

float orbLayer(float2 uv, float2 center, float radius, float softness) {
  float dist = length(uv - center);
  return smoothstep(radius + softness, radius - softness, dist);
}

float layeredOrbs(float2 uv, float time) {
  float total = 0.0;

  for (float i = 0.0; i < 5.0; i += 1.0) {
    float phase = i * 1.2;
    float2 center = float2(
      0.5 + sin(time * 0.2 + phase) * 0.3,
      0.5 + cos(time * 0.25 + phase) * 0.3
    );
    float radius = 0.15 + sin(time * 0.3 + phase) * 0.05;
    float layer = orbLayer(uv, center, radius, 0.1);
    total += layer * (1.0 - i * 0.15);
  }

  return total;
}
""",
    main="""
  float orbs = layeredOrbs(uv, time);

  float n1 = fbm(uv * 4.0 + time * 0.15, 3.0);
  float n2 = fbm(uv * 6.0 - time * 0.1, 2.0);
  n1 = n1 * 0.5 + 0.5;
  n2 = n2 * 0.5 + 0.5;

  // Coral reef tones
  float3 deepColor = float3(0.05, 0.15, 0.25);
  float3 midColor = float3(0.15, 0.4, 0.45);
  float3 brightColor = float3(0.3, 0.6, 0.55);
  float3 accentColor = float3(0.9, 0.5, 0.4);

  float3 baseColor = deepColor;
  baseColor = mix(baseColor, midColor, orbs * 0.7);
  baseColor = mix(baseColor, brightColor, smoothstep(0.5, 1.0, orbs));

  baseColor = mix(baseColor, accentColor, n1 * orbs * 0.3);

  float depth = n2 * (1.0 - orbs * 0.5);
  baseColor = mix(baseColor, deepColor * 0.7, depth * 0.3);

  float caustic = sin(uv.x * 15.0 + time) * sin(uv.y * 12.0 - time * 0.8);
  caustic = caustic * 0.5 + 0.5;
  baseColor += float3(0.1, 0.15, 0.12) * caustic * orbs * 0.15;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

MAGNETIC_FIELD = EffectDefinition(
    helpers="""
// ============================================
// FIELD LINES
// ============================================

float fieldLine(float2 uv, float2 pole1, float2 pole2, float time) {
  float2 d1 = uv - pole1;
  float2 d2 = uv - pole2;

  float a1 = atan(d1.y, d1.x);
  float a2 = atan(d2.y, d2.x);

  float field = sin((a1 - a2) * 8.0 + time * 0.5);
  field = smoothstep(-0.3, 0.3, field);

  float intensity = 1.0 / (length(d1) + 0.1) + 1.0 / (length(d2) + 0.1);
  intensity = smoothstep(2.0, 8.0, intensity);

  return field * intensity;
}
""",
    main="""
  // Drifting poles
  float2 pole1 = float2(0.3 + sin(time * 0.3) * 0.1, 0.5 + cos(time * 0.25) * 0.15);
  float2 pole2 = float2(0.7 + cos(time * 0.35) * 0.1, 0.5 + sin(time * 0.3) * 0.15);

  float field = fieldLine(uv, pole1, pole2, time);

  float2 pole3 = float2(0.5, 0.3 + sin(time * 0.2) * 0.1);
  float field2 = fieldLine(uv, pole1, pole3, time * 0.8) * 0.5;

  float totalField = field + field2;

  float3 darkColor = float3(0.03, 0.08, 0.12);
  float3 midColor = float3(0.1, 0.25, 0.35);
  float3 lineColor = float3(0.2, 0.5, 0.6);
  float3 brightColor = float3(0.4, 0.7, 0.75);

  float n = fbm(uv * 4.0 + time * 0.1, 3.0);
  n = n * 0.5 + 0.5;

  float3 baseColor = mix(darkColor, midColor, n);
  baseColor = mix(baseColor, lineColor, totalField * 0.6);
  baseColor = mix(baseColor, brightColor, smoothstep(0.7, 0.9, totalField) * 0.5);

  float poleGlow = exp(-length(uv - pole1) * 5.0) + exp(-length(uv - pole2) * 5.0);
  baseColor += float3(0.15, 0.3, 0.35) * poleGlow * 0.3;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

__all__ = ["FLOWING_STREAMS", "LAYERED_ORBS", "MAGNETIC_FIELD"]
