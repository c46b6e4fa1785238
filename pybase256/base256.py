#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import numbers

import numpy as np

from pybase256.base import calc_add_carry, calc_sub_borrow, calc_numeric_cmp, left_pad, truncate

MAX_SCALAR = 255


def check_scalar(n):
    '''
    Validate a single-byte multiplier, integers in 0..255 only.
    '''
    if not isinstance(n, numbers.Integral):
        raise TypeError(f"Multiplier {n!r} is not an integer")
    int_n = int(n)
    assert int_n in range(MAX_SCALAR + 1), f"Multiplier {int_n} out-of-range for a single byte"
    return int_n


class Underflow(ArithmeticError):
    '''
    Raised when a subtraction would go below zero. Carries both operands so
    the caller can decide what to do with them.
    '''

    def __init__(self, minuend, subtrahend):
        super().__init__(f"Cannot subtract {subtrahend!r} from smaller {minuend!r}")
        self.minuend = minuend
        self.subtrahend = subtrahend


class Base256:
    '''
    Arbitrary-length unsigned integers stored as big-endian base-256 digits,
    i.e. a plain byte buffer with the most significant byte first. Values are
    immutable, every operation returns a new value.

    Equality and ordering are over the bytes exactly as given: leading zeros
    count, and values of different lengths order lexicographically, not
    numerically (`[9] > [1, 0]`). Pad to a common width, or use
    `numeric_compare()`, when the numeric order is what matters.
    '''

    def __init__(self, inner=b''):
        '''
        Wrap a byte buffer.
        :param inner: bytes, bytearray or any iterable of ints in 0..255, most
        significant byte first. Defaults to the empty placeholder value.
        '''
        if isinstance(inner, numbers.Integral):
            raise TypeError(f"Expected a byte buffer, got int {inner}")
        self._inner = bytes(inner)

    @classmethod
    def new(cls, inner):
        return cls(inner)

    @classmethod
    def empty(cls):
        '''
        Zero-length placeholder, not a meaningful operand.
        '''
        return cls(b'')

    @classmethod
    def from_hex(cls, s):
        return cls(bytes.fromhex(s))

    @classmethod
    def from_int(cls, num, width=None):
        '''
        Big-endian encoding of a non-negative int, in the minimal number of
        bytes (at least one) unless an explicit byte `width` is given.
        '''
        int_num = int(num)
        assert int_num >= 0, f"Value {int_num} is negative"
        if width is None:
            width = max(1, (int_num.bit_length() + 7) // 8)
        return cls(int_num.to_bytes(width, 'big'))

    @classmethod
    def deserialize(cls, data):
        return cls(data)

    @property
    def inner(self):
        return self._inner

    def unwrap(self):
        return self._inner

    def serialize(self):
        return self._inner

    def to_hex(self):
        return self._inner.hex()

    def left_pad(self, width):
        return Base256(left_pad(self._inner, width))

    def numeric_compare(self, o):
        return calc_numeric_cmp(self._inner, o._inner)

    def __repr__(self):
        return f"base256{list(self._inner)}"

    def __bytes__(self):
        return self._inner

    def __int__(self):
        return int.from_bytes(self._inner, 'big')

    def __len__(self):
        return len(self._inner)

    def __getitem__(self, idx):
        return self._inner[idx]

    def __iter__(self):
        return iter(self._inner)

    def __hash__(self):
        return hash(self._inner)

    '''
    Comparisons are plain byte-string comparisons of the buffers, so they are
    lexicographic and length-sensitive.
    '''
    def __eq__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        return self._inner == o._inner

    def __lt__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        return self._inner < o._inner

    def __le__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        return self._inner <= o._inner

    def __gt__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        return self._inner > o._inner

    def __ge__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        return self._inner >= o._inner

    def add(self, o):
        '''
        Exact sum. Operands line up at their least significant byte, and a
        carry out of the most significant position becomes a new leading byte.
        '''
        a, b = self._inner, o._inner
        size = max(len(a), len(b))
        res = bytearray(size + 1)
        carry = 0
        for i in range(1, size + 1):
            x = a[-i] if i <= len(a) else 0
            y = b[-i] if i <= len(b) else 0
            res[-i], carry = calc_add_carry(x, y, carry)
        if carry:
            res[0] = carry
            return Base256(res)
        return Base256(res[1:])

    def subtract(self, o):
        '''
        Exact difference, as long as `self >= o` in byte order. Operands line
        up at their least significant byte and the result is as long as the
        longer of the two.
        '''
        if self._inner < o._inner:
            logging.debug(f"Rejecting {self!r} - {o!r}, minuend is smaller in byte order.")
            raise Underflow(self, o)

        a, b = self._inner, o._inner
        size = max(len(a), len(b))
        res = bytearray(size)
        borrow = 0
        for i in range(1, size + 1):
            x = a[-i] if i <= len(a) else 0
            y = b[-i] if i <= len(b) else 0
            res[-i], borrow = calc_sub_borrow(x, y, borrow)
        if borrow:
            # shorter minuend, e.g. [9] - [1, 0]
            logging.debug(f"Rejecting {self!r} - {o!r}, borrow out of the leading byte.")
            raise Underflow(self, o)
        return Base256(res)

    def xor(self, o):
        '''
        Bytewise exclusive or. Unlike the arithmetic, operands line up at
        their FIRST byte, and the tail of the longer one is copied as-is.
        '''
        size = max(len(self._inner), len(o._inner))
        x, y = np.zeros(size, dtype=np.uint8), np.zeros(size, dtype=np.uint8)
        x[:len(self._inner)] = np.frombuffer(self._inner, dtype=np.uint8)
        y[:len(o._inner)] = np.frombuffer(o._inner, dtype=np.uint8)
        return Base256(np.bitwise_xor(x, y).tobytes())

    def scalar_multiply(self, n):
        '''
        Multiply by a small integer via repeated addition, starting from `[0]`.
        '''
        int_n = check_scalar(n)
        res = Base256([0])
        for _ in range(int_n):
            res = res.add(self)
        return res

    def wrapped_add(self, o, width):
        '''
        Sum reduced to at most `width` bytes by dropping the most significant
        overflow. Short sums are not padded out to `width`.
        '''
        raw = self.add(o)
        if len(raw) > width:
            logging.debug(f"Truncating {len(raw):d} byte sum to {width:d} bytes.")
        return Base256(truncate(raw._inner, width))

    def wrapped_scalar_multiply(self, n, width):
        '''
        Repeated `wrapped_add` from `[0]`. The truncation happens after every
        addition, which is not the same function as truncating the full
        product once.
        '''
        int_n = check_scalar(n)
        res = Base256([0])
        for _ in range(int_n):
            res = res.wrapped_add(self, width)
        return res

    def __add__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        return self.add(o)

    def __sub__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        return self.subtract(o)

    def __xor__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        return self.xor(o)

    def __mul__(self, n):
        if not isinstance(n, numbers.Integral): return NotImplemented
        return self.scalar_multiply(n)
