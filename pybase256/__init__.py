#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pybase256.base256 import Base256, Underflow
from pybase256.digest import Digest, Digest256
