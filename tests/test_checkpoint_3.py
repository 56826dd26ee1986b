"""Checkpoint 3: Dimension Checks and Output Buffer Verification."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from dctref.metrics import count_mismatches
from dctref.transform import (
    forward_dct, inverse_dct, InvalidDimensionError,
    check_even_dimensions, prepare_output,
)


TRANSFORMS = [("forward", forward_dct), ("inverse", inverse_dct)]


def test_odd_dimensions_rejected():
    """Odd row or column counts must fail for both transforms."""
    print("=" * 60)
    print("Test 1: Odd Dimension Rejection")
    print("=" * 60)

    shapes = [(3, 4), (4, 3), (3, 3), (1, 2), (2, 5)]

    for shape in shapes:
        matrix = np.ones(shape)
        for name, transform in TRANSFORMS:
            with pytest.raises(InvalidDimensionError):
                transform(matrix)
        print(f"   ✓ {shape[0]}x{shape[1]}: rejected by forward and inverse")

    print("✅ Odd dimension rejection test passed")


def test_rejection_leaves_buffer_untouched():
    """A failed dimension check must not write to the output buffer."""
    print("\n" + "=" * 60)
    print("Test 2: Buffer Untouched on Rejection")
    print("=" * 60)

    src = np.arange(12, dtype=float).reshape(3, 4)

    for name, transform in TRANSFORMS:
        dst = np.full((3, 4), -1.0)
        with pytest.raises(InvalidDimensionError):
            transform(src, dst)
        assert np.all(dst == -1.0), f"{name} wrote to dst before failing"
        print(f"   ✓ {name}: dst unchanged")

    print("✅ Buffer untouched test passed")


def test_non_2d_rejected():
    """Inputs that are not two-dimensional are dimension errors."""
    print("\n" + "=" * 60)
    print("Test 3: Non-2D Input Rejection")
    print("=" * 60)

    for name, transform in TRANSFORMS:
        with pytest.raises(InvalidDimensionError, match="Expected 2D array"):
            transform(np.ones(4))
        with pytest.raises(InvalidDimensionError, match="Expected 2D array"):
            transform(np.ones((2, 2, 2)))
        print(f"   ✓ {name}: 1D and 3D inputs rejected")

    # Still a ValueError for callers that catch the broad type
    assert issubclass(InvalidDimensionError, ValueError)
    print("   ✓ InvalidDimensionError is a ValueError")

    print("✅ Non-2D rejection test passed")


def test_output_buffer_reused():
    """A supplied buffer is overwritten in place and returned."""
    print("\n" + "=" * 60)
    print("Test 4: Output Buffer Reuse")
    print("=" * 60)

    src = np.arange(8, dtype=float).reshape(4, 2)

    for name, transform in TRANSFORMS:
        expected = transform(src)

        dst = np.full((4, 2), 123.0)
        result = transform(src, dst)

        assert result is dst, f"{name} should return the supplied buffer"
        assert np.array_equal(dst, expected), f"{name} buffer contents differ from fresh output"

        # Separable mode writes into the same buffer too
        dst2 = np.full((4, 2), np.nan)
        result2 = transform(src, dst2, separable=True)
        assert result2 is dst2
        assert np.allclose(dst2, expected, atol=1e-10)

        print(f"   ✓ {name}: buffer overwritten and returned")

    print("✅ Output buffer reuse test passed")


def test_fresh_allocation():
    """Without a buffer, a new float64 matrix is returned."""
    print("\n" + "=" * 60)
    print("Test 5: Fresh Allocation")
    print("=" * 60)

    src = np.ones((2, 4))

    for name, transform in TRANSFORMS:
        first = transform(src)
        second = transform(src)

        assert first is not second, f"{name} should allocate per call"
        assert first is not src
        assert first.shape == (2, 4) and first.dtype == np.float64
        print(f"   ✓ {name}: new {first.shape} {first.dtype} matrix per call")

    print("✅ Fresh allocation test passed")


def test_invalid_buffers():
    """Wrong-shape or non-float buffers are rejected before writing."""
    print("\n" + "=" * 60)
    print("Test 6: Invalid Output Buffers")
    print("=" * 60)

    src = np.ones((4, 4))

    for name, transform in TRANSFORMS:
        wrong_shape = np.zeros((4, 2))
        with pytest.raises(InvalidDimensionError, match="Expected 4x4, got 4x2"):
            transform(src, wrong_shape)
        assert np.all(wrong_shape == 0)

        int_buffer = np.zeros((4, 4), dtype=np.int64)
        with pytest.raises(TypeError):
            transform(src, int_buffer)
        assert np.all(int_buffer == 0)

        with pytest.raises(TypeError):
            transform(src, [[0.0] * 4] * 4)

        print(f"   ✓ {name}: wrong shape, int dtype and list buffers rejected")

    # Narrower floats would break the round-trip tolerance
    for dtype in [np.float32, np.float16]:
        narrow = np.zeros((4, 4), dtype=dtype)
        with pytest.raises(TypeError, match="float64 or wider"):
            forward_dct(src, narrow)
        with pytest.raises(TypeError, match="float64 or wider"):
            inverse_dct(src, narrow)
        assert np.all(narrow == 0)
    print("   ✓ float32 and float16 buffers rejected")

    # A float64 buffer carries a random matrix through the round trip
    matrix = np.random.default_rng(8).standard_normal((8, 8)) * 100
    coefficients = forward_dct(matrix, np.zeros((8, 8), dtype=np.float64))
    recovered = inverse_dct(coefficients, np.empty((8, 8)))
    assert count_mismatches(matrix, recovered) == 0, "Round trip through buffers lost precision"
    print("   ✓ float64 buffers keep round trip within tolerance")

    print("✅ Invalid output buffer test passed")


def test_helpers():
    """Test the validation helpers directly."""
    print("\n" + "=" * 60)
    print("Test 7: Validation Helpers")
    print("=" * 60)

    assert check_even_dimensions(np.zeros((6, 2))) == (6, 2)
    with pytest.raises(InvalidDimensionError, match="must be even"):
        check_even_dimensions(np.zeros((6, 3)))
    print("   ✓ check_even_dimensions")

    fresh = prepare_output(None, (2, 4))
    assert fresh.shape == (2, 4) and np.all(fresh == 0)
    existing = np.ones((2, 4))
    assert prepare_output(existing, (2, 4)) is existing
    print("   ✓ prepare_output")

    print("✅ Validation helpers test passed")


def main():
    """Run all Checkpoint 3 tests."""
    print("\n" + "=" * 60)
    print("CHECKPOINT 3: DIMENSIONS AND BUFFERS VERIFICATION")
    print("=" * 60 + "\n")

    tests = [
        ("Odd Dimension Rejection", test_odd_dimensions_rejected),
        ("Buffer Untouched on Rejection", test_rejection_leaves_buffer_untouched),
        ("Non-2D Rejection", test_non_2d_rejected),
        ("Output Buffer Reuse", test_output_buffer_reused),
        ("Fresh Allocation", test_fresh_allocation),
        ("Invalid Output Buffers", test_invalid_buffers),
        ("Validation Helpers", test_helpers),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except Exception as e:
            print(f"❌ {name} failed: {e}")
            results.append((name, False))

    # Summary
    print("\n" + "=" * 60)
    print("CHECKPOINT 3 SUMMARY")
    print("=" * 60)

    all_passed = True
    for name, passed in results:
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"   {name}: {status}")
        if not passed:
            all_passed = False

    print("\n" + "=" * 60)
    if all_passed:
        print("🎉 CHECKPOINT 3 PASSED - All tests successful!")
    else:
        print("⚠️  CHECKPOINT 3 FAILED - Some tests did not pass")
    print("=" * 60 + "\n")

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
