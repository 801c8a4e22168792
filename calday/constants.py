#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Calendar tables and limits.
"""

import numpy as np

months  = {1: "January", 2: "February", 3:"March", 4: "April", 5: "May",
           6: "June", 7: "July", 8: "August", 9: "September", 10: "October",
           11: "November", 12: "December"}

# Lookup tables for the jitted kernels, indexed by month - 1.
MDAYS   = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31],
                   dtype=np.int64)
# days in the months before the month (common year)
CDAYS   = np.array([0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334],
                   dtype=np.int64)

MINYEAR = -4712                # Julian day 0 is at -4712-01-01 (Julian)
MAXYEAR = 9999
GREGORIAN_YEAR = 1582          # year of the Gregorian reform
GREGORIAN_MINYEAR = GREGORIAN_YEAR + 1

EPOCH_YEAR = 2000              # day numbers are accumulated from 1-1-2000
JD2000     = 2451545           # Julian day of 2000-01-01 (Gregorian)
JD2000_J   = 2451558           # Julian day of 2000-01-01 (Julian)
