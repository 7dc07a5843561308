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


def modpow(base, exponent, modulus):
    """Return base^exponent mod modulus for a nonnegative exponent."""
    if exponent < 0:
        raise ValueError('negative exponent: %r' % (exponent,))
    return pow(base, exponent, modulus)


def is_residue(n, p):           # p must be an odd prime
    # Euler's criterion: n^((p - 1)/2) is 1 for residues, p - 1 otherwise.
    return modpow(n, (p - 1)//2, p) == 1
