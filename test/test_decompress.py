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


import os
import subprocess
import sys


SCRIPT = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    os.pardir, 'example', 'decompress.py',
)

P = 0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff
GX = 0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296
GY = 0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5


def run(*args):
    return subprocess.run(
        [sys.executable, SCRIPT] + list(args),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        universal_newlines=True,
    )


def point(out):
    coords = {}
    for line in out.splitlines():
        name, value = line.split()
        coords[name] = int(value, 16)
    return coords['x'], coords['y']


def test_generator():
    proc = run('p256', '03%064x' % (GX,))
    assert proc.returncode == 0, proc.stderr
    assert point(proc.stdout) == (GX, GY)


def test_even_prefix():
    proc = run('p256', '02%064x' % (GX,))
    assert proc.returncode == 0, proc.stderr
    assert point(proc.stdout) == (GX, P - GY)


def test_secp256k1_generator():
    gx = 0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798
    gy = 0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8
    proc = run('secp256k1', '02%064x' % (gx,))
    assert proc.returncode == 0, proc.stderr
    assert point(proc.stdout) == (gx, gy)


def test_rejects():
    for encoded in [
            '05%064x' % (GX,),              # bad prefix
            '01%064x' % (GX,),              # bad prefix
            '04%064x' % (GX,),              # uncompressed prefix
            '03%062x' % (GX >> 8,),         # too short
            '03%066x' % (GX,),              # too long
            '',                             # empty
            '03%064x' % (P,),               # x = p
            '02%064x' % (0x123456789,),     # not on the curve
            'zz',                           # not hex
    ]:
        proc = run('p256', encoded)
        assert proc.returncode == 1, encoded
        assert proc.stdout == '', encoded
        assert proc.stderr != '', encoded


def test_usage():
    assert run().returncode == 1
    assert run('p521', '03%064x' % (GX,)).returncode == 1
    assert run('p256').returncode == 1
