import itertools
import random
import threading

import pytest

from barcodes import (
    CodeRegistry, InternalCodeGenerator, RegistryExhaustedError, Symbology,
    clear_registry, detect, generate_internal_code, is_generated,
    is_valid_internal_code,
)
from barcodes.internal_code import MAX_ATTEMPTS


class FixedRandom:
    """rng stub that always draws the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def randrange(self, _stop):
        self.calls += 1
        return self.value


def test_code_layout():
    gen = InternalCodeGenerator(clock=lambda: 1_700_000_123_456, rng=FixedRandom(7))
    assert gen.generate("INT") == "INT0012345607"


def test_short_clock_is_zero_padded():
    gen = InternalCodeGenerator(clock=lambda: 42, rng=FixedRandom(3))
    assert gen.generate("INT") == "INT0000004203"


def test_generated_codes_are_distinct_and_valid():
    codes = [generate_internal_code("INT") for _ in range(50)]
    assert len(set(codes)) == len(codes)
    for code in codes:
        assert code.startswith("INT")
        assert is_valid_internal_code(code)
        assert detect(code) == Symbology.INTERNAL
        assert is_generated(code)


def test_custom_prefix():
    code = generate_internal_code("TOKO")
    assert code.startswith("TOKO")
    assert is_valid_internal_code(code, "TOKO")
    assert detect(code, internal_prefix="TOKO") == Symbology.INTERNAL


def test_clear_registry():
    code = generate_internal_code()
    assert is_generated(code)
    clear_registry()
    assert not is_generated(code)


def test_collision_rereads_clock():
    ticks = itertools.count(1000)
    registry = CodeRegistry()
    registry.add("INT0000100005")
    gen = InternalCodeGenerator(registry, clock=lambda: next(ticks), rng=FixedRandom(5))
    assert gen.generate() == "INT0000100105"
    assert len(registry) == 2


def test_collision_redraws_random():
    draws = iter([5, 5, 6])

    class Scripted:
        def randrange(self, _stop):
            return next(draws)

    registry = CodeRegistry()
    registry.add("INT0000100005")
    gen = InternalCodeGenerator(registry, clock=lambda: 1000, rng=Scripted())
    assert gen.generate() == "INT0000100006"
    assert "INT0000100006" in registry


def test_exhaustion_raises():
    registry = CodeRegistry()
    rng = FixedRandom(0)
    gen = InternalCodeGenerator(registry, clock=lambda: 12345678, rng=rng)
    first = gen.generate()
    assert first == "INT1234567800"
    assert rng.calls == 1

    with pytest.raises(RegistryExhaustedError, match="after 100 attempts"):
        gen.generate()
    assert rng.calls == 1 + MAX_ATTEMPTS == 101
    assert len(registry) == 1


def test_exhaustion_honours_custom_attempt_limit():
    registry = CodeRegistry()
    registry.add("INT0000000104")
    rng = FixedRandom(4)
    gen = InternalCodeGenerator(registry, clock=lambda: 1, rng=rng, max_attempts=7)
    with pytest.raises(RegistryExhaustedError, match="after 7 attempts"):
        gen.generate()
    assert rng.calls == 7


def test_registries_are_isolated():
    a = InternalCodeGenerator(CodeRegistry(), clock=lambda: 5, rng=FixedRandom(1))
    b = InternalCodeGenerator(CodeRegistry(), clock=lambda: 5, rng=FixedRandom(1))
    code = a.generate()
    assert code == b.generate() == "INT0000000501"
    assert a.registry is not b.registry
    assert not is_generated(code)


def test_concurrent_generation_stays_unique():
    registry = CodeRegistry()
    gen = InternalCodeGenerator(registry, clock=lambda: 99_999_999,
                                rng=random.Random(3), max_attempts=10_000)
    results = []
    lock = threading.Lock()

    def worker():
        local = [gen.generate() for _ in range(10)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 50
    assert len(set(results)) == 50
    assert len(registry) == 50
