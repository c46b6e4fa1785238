#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numbers

from pybase256.base import left_pad
from pybase256.base256 import Base256


class Digest(Base256):
    '''
    Fixed-width Base256 values, byte strings that explicitly over-flow
    according to a particular number of bytes. Always stored at exactly
    `width` bytes, so ordering between digests of one width is numeric.
    '''

    def __init__(self, inner, width):
        '''
        Initialize the class with a big-endian byte buffer, left-padded with
        zeros up to `width` bytes.
        :param inner: Byte buffer, no longer than `width`
        :param width: Number of bytes in this digest.
        '''
        buf = Base256(inner).inner
        assert width > 0, f"Width {width} must be positive"
        assert len(buf) <= width, f"Value of {len(buf):,d} bytes out-of-range for {width:,d} byte digest"
        super().__init__(left_pad(buf, width))
        self.width = width

    @classmethod
    def empty(cls, **kwargs):
        '''
        All-zero digest. `Digest.empty(width=4)`, or just `Digest256.empty()`.
        '''
        return cls(b'', **kwargs)

    def __repr__(self):
        return f"digest{self.width * 8}({self.to_hex()})"

    def _ensure_width(self, o):
        if isinstance(o, Digest):
            assert o.width == self.width, f"Cannot combine {self.width:,d} and {o.width:,d} byte digests"

    '''
    Addition and multiplication wrap at the digest width, so results stay
    digests of the same width.
    '''
    def __add__(self, o):
        if not isinstance(o, Base256): return NotImplemented
        self._ensure_width(o)
        result = self.wrapped_add(o, self.width)
        return self.__class__(result.inner, width=self.width)

    def __mul__(self, n):
        if not isinstance(n, numbers.Integral): return NotImplemented
        result = self.wrapped_scalar_multiply(n, self.width)
        return self.__class__(result.inner, width=self.width)

    def __xor__(self, o):
        if not isinstance(o, Digest): return super().__xor__(o)
        self._ensure_width(o)
        return self.__class__(self.xor(o).inner, width=self.width)


class Digest256(Digest):
    """
    Class for a common 256-bit (32-byte) digest, e.g. SHA-256 output.
    """

    def __init__(self, inner=b'', width=32):
        super().__init__(inner, width=width)
