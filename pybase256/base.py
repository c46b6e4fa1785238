#!/usr/bin/env python
# -*- coding: utf-8 -*-

'''
Stateless functions that are used throughout the Base256 value and digest
classes.
'''

BYTE_BASE = 256


def calc_add_carry(a, b, carry=0):
    '''
    Add two bytes and an incoming carry. Returns the result byte and the
    carry into the next, more significant, position.
    '''
    byte_sum = int(a) + int(b) + int(carry)
    return byte_sum % BYTE_BASE, byte_sum // BYTE_BASE


def calc_sub_borrow(a, b, borrow=0):
    '''
    Subtract one byte and an incoming borrow from another. When the minuend
    runs short the difference is lifted by 255 and a borrow is taken from the
    next, more significant, position. Returns the result byte and the
    outgoing borrow.
    '''
    diff = int(a) - int(borrow) - int(b)
    if diff < 0:
        # 0 - 1 - 255 lifts to -1, wrap it back into a byte
        return (diff + BYTE_BASE - 1) % BYTE_BASE, 1
    return diff, 0


def truncate(buf, width):
    '''
    Keep only the last (least significant) `width` bytes of a big-endian
    buffer. Shorter buffers come back untouched, never padded.
    '''
    assert width >= 0, f"Width {width} must be non-negative"
    if len(buf) <= width:
        return bytes(buf)
    return bytes(buf[len(buf) - width:])


def left_pad(buf, width):
    '''
    Prepend zero bytes to a big-endian buffer until it is `width` bytes long.
    '''
    return bytes(max(0, width - len(buf))) + bytes(buf)


def calc_numeric_cmp(a, b):
    '''
    Numeric three-way comparison of two big-endian buffers of any length:
    -1, 0 or 1. Both sides are left-padded to a common width first, so
    unlike plain byte ordering `[9]` sorts below `[1, 0]`.
    '''
    width = max(len(a), len(b))
    a, b = left_pad(a, width), left_pad(b, width)
    return (a > b) - (a < b)
