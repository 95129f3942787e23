#!/usr/bin/env python3
"""Single-machine timing benchmark for Pedersen parameter generation and commitments.

Steps:
- generate a fresh {p, g, h} triple of the requested size (or use the shipped
  2048-bit default set when the size is 0);
- time commit / add / subtract / scale over N random openings;
- self-check: every homomorphic identity must hold for every sample;
- print per-operation statistics and a final JSON block for later aggregation.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pedersen import commitment as pc
from pedersen.params import DEFAULT_PARAMETERS, Parameters, check_parameters, generate_parameters_sync

logger = logging.getLogger("benchmark_pedersen")


def _ms(sec: float) -> float:
    return sec * 1000.0


def _prompt_int(msg: str, default: int) -> int:
    s = input(msg).strip()
    return default if s == "" else int(s)


def prompt_inputs() -> tuple[int, int, int]:
    bits = _prompt_int("Modulus size in bits, 0 for the built-in 2048-bit set (default 0): ", 0)
    iterations = _prompt_int("Samples per operation (default 50): ", 50)
    scalar = _prompt_int("Scalar k for scale() (default 7): ", 7)
    return bits, iterations, scalar


def _summary(samples: List[float]) -> Dict[str, float]:
    arr = np.array(samples, dtype=np.float64) * 1000.0
    return {
        "mean_ms": float(np.mean(arr)),
        "std_ms": float(np.std(arr)),
        "p50_ms": float(np.percentile(arr, 50)),
        "p95_ms": float(np.percentile(arr, 95)),
        "max_ms": float(np.max(arr)),
    }


def _timed(fn, *args):
    t0 = time.perf_counter()
    out = fn(*args)
    return out, time.perf_counter() - t0


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    bits, iterations, k = prompt_inputs()
    if iterations < 1:
        raise ValueError(f"sample count must be positive: {iterations}")
    if k < 0:
        raise ValueError("scalar must be non-negative for the identity check")

    # ===== parameters =====
    t0 = time.perf_counter()
    if bits == 0:
        params: Parameters = DEFAULT_PARAMETERS
    else:
        params = generate_parameters_sync(bits)
    t_params = time.perf_counter() - t0
    print(f"[params] {params.bit_length}-bit modulus ready: {_ms(t_params):.2f} ms")

    t0 = time.perf_counter()
    check_parameters(params, rounds=20)
    t_check = time.perf_counter() - t0
    print(f"[params] validation (20 Miller-Rabin rounds on p and q): {_ms(t_check):.2f} ms")

    timings: Dict[str, List[float]] = {"commit": [], "add": [], "subtract": [], "scale": []}
    failures = 0

    for i in range(iterations):
        m1 = pc.random_blinding(4)
        m2 = m1 // 3
        r1 = pc.random_blinding()
        r2 = r1 // 3

        c1, dt = _timed(pc.commit, m1, r1, params)
        timings["commit"].append(dt)
        c2 = pc.commit(m2, r2, params)

        c_sum, dt = _timed(pc.add, c1, c2, params)
        timings["add"].append(dt)
        c_sub, dt = _timed(pc.subtract, c1, c2, params)
        timings["subtract"].append(dt)
        c_mul, dt = _timed(pc.scale, c1, k, params)
        timings["scale"].append(dt)

        ok = (
            c_sum == pc.commit(m1 + m2, r1 + r2, params)
            and c_sub == pc.commit(m1 - m2, r1 - r2, params)
            and c_mul == pc.commit(k * m1, k * r1, params)
        )
        if not ok:
            failures += 1
            logger.warning("homomorphic identity failed on sample %d", i)

    stats = {name: _summary(samples) for name, samples in timings.items()}

    print("\n[timings]")
    for name, st in stats.items():
        print(f"  {name:<9} mean {st['mean_ms']:.3f} ms | p95 {st['p95_ms']:.3f} ms | max {st['max_ms']:.3f} ms")
    print(f"[check] identity failures: {failures}/{iterations}")

    result = {
        "bits": params.bit_length,
        "generated": bits != 0,
        "iterations": iterations,
        "scalar": k,
        "success": failures == 0,
        "params_sec": t_params,
        "validation_sec": t_check,
        "operations": stats,
    }

    print("\n--- JSON result ---")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
