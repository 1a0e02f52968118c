"""Hash-noise effects built from cells, reefs and foam."""

from __future__ import annotations

from vibeshaders.effects.base import EffectDefinition

CELLULAR = EffectDefinition(
    helpers="""
// ============================================
// REEF PATTERN
// ============================================

float reefPattern(float2 uv, float time) {
  float2 p = uv * 8.0;

  float n1 = fbm(p + time * 0.1, 4);
  float n2 = fbm(p * 1.5 + float2(100.0, 0.0) - time * 0.08, 3);
  float n3 = fbm(p * 0.5 + time * 0.05, 5);

  float coral = smoothstep(0.4, 0.6, n1 * n2);
  coral *= smoothstep(0.3, 0.7, n3);

  return coral;
}

// ============================================
// WATER CAUSTICS
// ============================================

float caustics(float2 uv, float time) {
  float2 p = uv * 12.0;

  float c1 = sin(p.x * 3.0 + time + noise(p) * 2.0);
  float c2 = sin(p.y * 3.0 - time * 0.7 + noise(p + 50.0) * 2.0);
  float c3 = sin((p.x + p.y) * 2.0 + time * 0.5);

  return (c1 * c2 * c3) * 0.5 + 0.5;
}
""",
    main="""
  float complexity = mix(0.6, 1.4, u_complexity);

  float2 driftUV = uv + float2(sin(time * 0.1) * 0.1, cos(time * 0.08) * 0.1);

  float depth = fbm(driftUV * 3.0 + time * 0.05, 4);
  float3 waterColor = mix(float3(TURQUOISE), float3(CYAN), depth);
  waterColor = mix(waterColor, float3(TEAL_DEEP), smoothstep(0.4, 0.7, depth));

  float reef = reefPattern(driftUV, time);
  waterColor = mix(waterColor, float3(REEF_DARK), reef * 0.7 * complexity);

  float clusters = fbm(uv * 15.0 + time * 0.02, 3);
  float darkSpots = smoothstep(0.55, 0.7, clusters);
  waterColor = mix(waterColor, float3(REEF_DARK) * 0.8, darkSpots * 0.5);

  float caust = caustics(driftUV, time);
  waterColor += float3(0.1, 0.15, 0.12) * caust * 0.15;

  // Shallows
  float shallow = fbm(uv * 4.0 - time * 0.03, 3);
  shallow = smoothstep(0.5, 0.8, shallow);
  waterColor = mix(waterColor, float3(TURQUOISE), shallow * 0.25);

  float foam = fbm(uv * 20.0 + time * 0.1, 2);
  foam = smoothstep(0.6, 0.9, foam);
  waterColor += float3(0.15, 0.2, 0.18) * foam * 0.15;

  half3 color = half3(waterColor);
  color = pow(color, half3(0.95));
""",
)

CELLULAR_MEMBRANE = EffectDefinition(
    helpers="""
// ============================================
// VORONOI CELLS
// ============================================

float2 voronoiCell(float2 p) {
  float2 n = floor(p);
  float2 f = fract(p);

  float2 closestSite = float2(0.0);
  float minDist = 10.0;

  for (float j = -1.0; j <= 1.0; j += 1.0) {
    for (float i = -1.0; i <= 1.0; i += 1.0) {
      float2 neighbor = float2(i, j);
      float2 site = hash(n + neighbor) * float2(0.5) + 0.25 + neighbor;
      float dist = length(f - site);
      if (dist < minDist) {
        minDist = dist;
        closestSite = site;
      }
    }
  }

  return float2(minDist, hash(closestSite));
}

float membrane(float2 uv, float time) {
  float2 p = uv * 6.0 + time * 0.1;
  float2 cell = voronoiCell(p);

  float edge = smoothstep(0.0, 0.1, cell.x);
  float fill = smoothstep(0.1, 0.3, cell.x);

  return 1.0 - edge + fill * 0.3;
}
""",
    main="""
  float2 animUV = uv;
  animUV += float2(
    fbm(uv * 2.0 + time * 0.15, 2) * 0.05,
    fbm(uv * 2.0 + 50.0 - time * 0.1, 2) * 0.05
  );

  float cell = membrane(animUV, time);

  float n1 = fbm(uv * 4.0 + time * 0.1, 3);
  float n2 = fbm(uv * 8.0 - time * 0.15, 2);
  n1 = n1 * 0.5 + 0.5;
  n2 = n2 * 0.5 + 0.5;

  // Lagoon tones
  float3 deepColor = float3(0.03, 0.12, 0.18);
  float3 midColor = float3(0.1, 0.3, 0.38);
  float3 brightColor = float3(0.2, 0.5, 0.55);
  float3 membraneColor = float3(0.15, 0.4, 0.45);
  float3 highlightColor = float3(0.4, 0.65, 0.6);

  float3 baseColor = deepColor;
  baseColor = mix(baseColor, midColor, n1);
  baseColor = mix(baseColor, membraneColor, cell * 0.5);
  baseColor = mix(baseColor, brightColor, smoothstep(0.6, 0.9, cell) * n2);

  float edgeHighlight = smoothstep(0.4, 0.5, cell) * (1.0 - smoothstep(0.5, 0.6, cell));
  baseColor = mix(baseColor, highlightColor, edgeHighlight * 0.4);

  float pulse = sin(time * 0.5 + cell * 3.0) * 0.5 + 0.5;
  baseColor *= 0.9 + pulse * 0.2;

  half3 color = half3(baseColor);
  color = pow(color, half3(0.95));
""",
)

CRYSTALLINE = EffectDefinition(
    helpers="""
// ============================================
// FOAM PATTERN
// ============================================

float foamPattern(float2 uv, float time, float scale) {
  float2 p = uv * scale;
  p += float2(time * 0.1, time * 0.05);

  float n1 = fbm(p, 4);
  float n2 = fbm(p * 2.0 + 50.0, 3);
  float n3 = fbm(p * 0.5 + 100.0, 4);

  float foam = n1 * n2;
  foam = smoothstep(0.2, 0.5, foam);
  foam *= smoothstep(0.3, 0.6, n3);

  return foam;
}

// ============================================
// WAVE PATTERN
// ============================================

float wavePattern(float2 uv, float time) {
  float wave = sin(uv.x * 8.0 + time + fbm(uv * 3.0, 3) * 2.0);
  wave += sin(uv.y * 6.0 - time * 0.7 + fbm(uv * 2.0 + 50.0, 3) * 2.0);
  wave *= 0.5;
  return wave * 0.5 + 0.5;
}
""",
    main="""
  float complexity = mix(0.6, 1.4, u_complexity);

  float2 warpedUV = uv;
  warpedUV += float2(
    fbm(uv * 2.0 + time * 0.1, 3) * 0.1,
    fbm(uv * 2.0 + 50.0 - time * 0.08, 3) * 0.1
  );

  float depth = fbm(warpedUV * 3.0 + time * 0.05, 4);

  float3 deepOcean = float3(0.02, 0.18, 0.28);
  float3 teal = float3(0.08, 0.42, 0.48);
  float3 cyan = float3(0.18, 0.62, 0.68);
  float3 foam = float3(0.92, 0.95, 0.96);
  float3 spray = float3(0.75, 0.85, 0.88);

  float3 baseColor = deepOcean;
  baseColor = mix(baseColor, teal, smoothstep(0.3, 0.6, depth));
  baseColor = mix(baseColor, cyan, smoothstep(0.5, 0.8, depth) * 0.5);

  float wave = wavePattern(warpedUV, time);
  baseColor = mix(baseColor, cyan * 1.1, wave * 0.2);

  float foam1 = foamPattern(warpedUV, time, 8.0 * complexity);
  float foam2 = foamPattern(warpedUV + 30.0, time * 0.8, 12.0);
  float foam3 = foamPattern(warpedUV + 60.0, time * 1.2, 6.0);

  float totalFoam = max(foam1, foam2 * 0.7);
  totalFoam = max(totalFoam, foam3 * 0.5);

  baseColor = mix(baseColor, spray, totalFoam * 0.6);
  baseColor = mix(baseColor, foam, smoothstep(0.5, 0.8, totalFoam) * 0.8);

  // Fine spray
  float sprayNoise = fbm(uv * 30.0 + time * 0.3, 2);
  sprayNoise = smoothstep(0.65, 0.85, sprayNoise);
  baseColor = mix(baseColor, foam, sprayNoise * 0.3 * complexity);

  float caustic = sin(warpedUV.x * 20.0 + time) * sin(warpedUV.y * 18.0 - time * 0.7);
  caustic = caustic * 0.5 + 0.5;
  baseColor += cyan * caustic * (1.0 - totalFoam) * 0.1;

  half3 color = half3(baseColor);
""",
)

__all__ = ["CELLULAR", "CELLULAR_MEMBRANE", "CRYSTALLINE"]
