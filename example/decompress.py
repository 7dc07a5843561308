# -*- coding: utf-8 -*-

#  Copyright 2020 Taylor R Campbell
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

# Usage: python decompress.py CURVE HEX
#
#       Decompress a SEC1 compressed point 02||x or 03||x on CURVE
#       (p224, p256, or secp256k1) by solving y^2 = x^3 + a x + b for y
#       and picking the root whose parity matches the prefix.
#

import binascii
import sys

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.asymmetric import ec

from modsqrt.tonelli import sqrt_mod


CURVES = {
    'p224': (
        2**224 - 2**96 + 1,
        -3,
        0xb4050a850c04b3abf54132565044b0b7d7bfd8ba270b39432355ffb4,
        ec.SECP224R1(),
    ),
    'p256': (
        0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff,
        -3,
        0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b,
        ec.SECP256R1(),
    ),
    'secp256k1': (
        2**256 - 2**32 - 977,
        0,
        7,
        ec.SECP256K1(),
    ),
}


def decompress(curve, encoded):
    p, a, b, pyca = curve
    nbytes = (p.bit_length() + 7)//8
    if len(encoded) != 1 + nbytes or encoded[0] not in (2, 3):
        raise Exception('Malformed compressed point')
    x = int.from_bytes(encoded[1:], 'big')
    if x >= p:
        raise Exception('Invalid x coordinate')
    y = sqrt_mod(pow(x, 3, p) + a*x + b, p)
    if y is None:
        raise Exception('Point not on curve')
    if y & 1 != encoded[0] & 1:
        y = (p - y) % p
    n = ec.EllipticCurvePublicNumbers(x, y, pyca)
    return n.public_key(backend=default_backend())


def main(argv):
    if len(argv) != 3 or argv[1] not in CURVES:
        sys.stderr.write('usage: %s {%s} HEX\n' % (
            argv[0], ','.join(sorted(CURVES)),
        ))
        return 1
    try:
        encoded = binascii.unhexlify(argv[2])
    except (binascii.Error, ValueError) as e:
        sys.stderr.write('bad hex: %s\n' % (e,))
        return 1
    try:
        pk = decompress(CURVES[argv[1]], encoded)
    except Exception as e:
        sys.stderr.write('%s\n' % (e,))
        return 1
    numbers = pk.public_numbers()
    print('x %x' % (numbers.x,))
    print('y %x' % (numbers.y,))
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
