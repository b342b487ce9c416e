from __future__ import annotations

import fputils


def test_public_api():
    assert set(fputils.__all__) <= set(dir(fputils))


def test_original_examples():
    assert fputils.compose(lambda x: x * 3, lambda x: x + 2)(2) == 12
    assert fputils.pipe(lambda x: x * 3, lambda x: x + 2)(2) == 8
    assert fputils.curry(lambda a, b, c: a + b + c)(1)(2)(3) == 6
    assert fputils.curryN(3, lambda *args: sum(args))(1, 2, 3, 4) == 6

    calls = []

    @fputils.memoize
    def add(a, b):
        calls.append((a, b))
        return a + b

    assert add(1, 2) == add(1, 2) == 3
    assert calls == [(1, 2)]


def test_errors_share_base_class():
    from fputils.common.exceptions import KeySerializationError, SignatureError

    assert issubclass(KeySerializationError, fputils.FPError)
    assert issubclass(SignatureError, fputils.FPError)
