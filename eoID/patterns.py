###############################################################################
# Identification of earth observation product names
# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
"""
This file contains regular expressions used for identifying product names.
The signature expressions are searched in a raw string to decide whether a convention
claims it. They only check the mission family code, and
a claimed name that violates its convention is reported as malformed.
The names of the signatures correspond to the convention names registered in eoID.drivers.
All other expressions describe the character classes of single fields.
"""
# mission code or leading instrument token; S2A_MSIL1C_..., MSIL1C_...
sentinel2 = r'^S2|^MSI'

sentinel1 = r'^S1'

sentinel3 = r'^S3'

# s1a-iw-grd-vv-..., the file names of the datasets inside a Sentinel-1 product
sentinel1_dataset = r'^s1[a-z]-'

# LC08_L1TP_...
landsat = r'^L[A-Z][0-9]{2}_'

# LC80390222013076EDC00
landsat_scene = r'^L[A-Z][0-9]{3}'

# Military Grid Reference System tile designator as used by Sentinel-2, e.g. 53NMJ
mgrs_tile = r'(?P<utm_zone>0[1-9]|[1-5][0-9]|60)' \
            r'(?P<latitude_band>[C-HJ-NP-X])' \
            r'(?P<column>[A-HJ-NP-Z])' \
            r'(?P<row>[A-HJ-NP-V])'

hexadecimal = r'[0-9A-F]+'

hexadecimal_lower = r'[0-9a-f]+'

alphanumeric = r'[A-Z0-9]+'

# Sentinel-3 data type codes are left-aligned and padded with underscores, e.g. EFR___ or EFR_BW
s3_data_type = r'[A-Z0-9][A-Z0-9_]{5}'

# Sentinel-3 instance ids
s3_stripe = r'(?P<duration>[0-9]{4})_' \
            r'(?P<cycle>[0-9]{3})_' \
            r'(?P<relative_orbit>[0-9]{3})_' \
            r'(?P<frame>[0-9]{4}|____)'

s3_global = r'GLOBAL_{11}'

s3_aux = r'_{17}'

s3_tile = r'(?P<tile>[A-Z][A-Z0-9_]{16})'

s3_baseline_collection = r'[A-Z0-9]{1,3}_{0,2}|___'
