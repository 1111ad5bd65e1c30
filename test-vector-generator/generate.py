#!/usr/bin/env python3
"""
BitInt test vector generator.

Draws seeded random operand pairs for each suite in a YAML config and writes
the expected results of every operation as JSON, so the test suite can replay
them without recomputing expectations bit by bit.

Examples:
    python generate.py suites.yaml ../test-vectors
"""

import hashlib
import json
import sys
from pathlib import Path
from typing import Dict, List

import numpy as np
import yaml

OPERATIONS = ["and", "or", "xor", "add", "sub", "mul"]


def bit_width(value: int) -> int:
    """Width BitInt(value) is built with: ceil(log2(value)) + 1."""
    return (value - 1).bit_length() + 1


def low_bits(value: int, width: int) -> int:
    """Keep the low width bits of value."""
    return value & ((1 << width) - 1)


def expected_results(a: int, b: int) -> Dict[str, Dict[str, int]]:
    """Compute expected value and width of every operation on a and b."""
    width_a = bit_width(a)
    width_b = bit_width(b)
    overlap = min(width_a, width_b)
    # OR/XOR keep a's bits beyond b's width; AND clears them
    high_a = a - low_bits(a, overlap)

    return {
        "and": {"value": a & b, "width": width_a},
        "or": {"value": high_a | low_bits(a | b, overlap), "width": width_a},
        "xor": {"value": high_a | low_bits(a ^ b, overlap), "width": width_a},
        "add": {"value": a + b, "width": max(width_a, width_b) + 2},
        "sub": {"value": max(a - b, 0), "width": max(width_a, width_b) + 5},
        "mul": {"value": a * b, "width": width_a + width_b},
    }


def generate_suite(suite: dict) -> dict:
    """Generate one suite of vectors."""
    rng = np.random.default_rng(suite["seed"])
    count = suite["count"]
    max_value = suite["max_value"]

    operands = rng.integers(1, max_value, size=(count, 2), endpoint=True, dtype=np.uint64)

    vectors: List[Dict] = []
    for a, b in operands:
        a, b = int(a), int(b)
        vectors.append({"a": a, "b": b, "expected": expected_results(a, b)})

    payload = json.dumps(vectors, sort_keys=True).encode()
    return {
        "name": suite["name"],
        "seed": suite["seed"],
        "max_value": max_value,
        "slow": bool(suite.get("slow", False)),
        "operations": OPERATIONS,
        "md5": hashlib.md5(payload).hexdigest(),
        "vectors": vectors,
    }


def load_config(config_file) -> dict:
    """Load suite definitions from YAML."""
    with open(config_file, 'r') as f:
        return yaml.safe_load(f)


def main():
    if len(sys.argv) != 3:
        print("Usage: generate.py <suites.yaml> <output-dir>")
        sys.exit(1)

    config = load_config(sys.argv[1])
    output_dir = Path(sys.argv[2])

    output_dir.mkdir(parents=True, exist_ok=True)

    for suite in config["suites"]:
        result = generate_suite(suite)
        output_path = output_dir / f"{suite['name']}-vectors.json"
        with open(output_path, 'w') as f:
            json.dump(result, f, indent=2)
        print(f"Generated {len(result['vectors'])} vectors -> {output_path}")
        print(f"  MD5: {result['md5']}")


if __name__ == '__main__':
    main()
