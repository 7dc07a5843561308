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

# ## WARNING ###
#
# This code does not run in constant time -- the residue test, the
# non-residue search, and the order descent all branch on the inputs.
# Do not feed it secrets.
#
# ## WARNING ###

# Tonelli-Shanks square roots modulo an odd prime p.
#
#       Write p - 1 = q 2^s with q odd.  If s = 1, i.e. p = 3 (mod 4),
#       then n^((p + 1)/4) is a square root of any residue n, since
#
#               (n^((p + 1)/4))^2 = n^((p + 1)/2) = n * n^((p - 1)/2) = n.
#
#       Otherwise pick the least non-residue z and start from
#
#               c = z^q,  r = n^((q + 1)/2),  t = n^q,  m = s,
#
#       which maintains r^2 = t n throughout.  While t != 1, t has order
#       2^i for some 0 < i < m; multiplying r by b = c^(2^(m - i - 1))
#       and t by b^2 kills the top bit of that order, so m strictly
#       decreases and the loop ends after at most s rounds with r^2 = n.
#
#       For composite p none of this holds and the answer is whatever
#       falls out, except that we never loop forever in the descent.
#

from ._mod import is_residue
from ._mod import modpow


class InvalidModulus(ValueError):
    pass


class ModulusLikelyNotPrime(ValueError):
    pass


def sqrt_mod(n, p, max_trials=None):
    """Return r with r^2 = n (mod p), or None if n is not a square.

    p must be an odd prime; InvalidModulus is raised if it is even or
    not greater than 2, but primality is not checked.  The other root
    is p - r.  If max_trials is given, it must be at least 1, and we
    give up with ModulusLikelyNotPrime after that many candidates in
    the search for a non-residue.
    """
    assert isinstance(n, int), type(n)
    assert isinstance(p, int), type(p)
    if p <= 2 or p % 2 == 0:
        raise InvalidModulus('modulus must be an odd prime > 2: %r' % (p,))
    if max_trials is not None and max_trials < 1:
        raise ValueError('max_trials must be positive: %r' % (max_trials,))

    n %= p
    if n == 0:
        return 0
    if not is_residue(n, p):
        return None

    q, s = _split(p - 1)
    if s == 1:
        return modpow(n, (p + 1)//4, p)
    return _descend(n, p, q, s, max_trials)


def _split(x):
    # x = q 2^s, q odd
    q, s = x, 0
    while q & 1 == 0:
        q >>= 1
        s += 1
    return q, s


def _nonresidue(p, max_trials):
    z = 2
    trials = 0
    while is_residue(z, p):
        trials += 1
        if max_trials is not None and trials >= max_trials:
            raise ModulusLikelyNotPrime(
                'no non-residue among %d candidates mod %r' % (trials, p)
            )
        z += 1
    return z


def _descend(n, p, q, s, max_trials=None):
    z = _nonresidue(p, max_trials)
    c = modpow(z, q, p)
    r = modpow(n, (q + 1)//2, p)
    t = modpow(n, q, p)
    m = s

    while t != 1:
        # least i in [1, m) with t^(2^i) = 1
        i = 1
        tt = t * t % p
        while tt != 1 and i < m:
            tt = tt * tt % p
            i += 1
        if i >= m:
            return None         # unreachable for prime p

        b = modpow(c, 1 << (m - i - 1), p)
        c = b * b % p
        r = r * b % p
        t = t * c % p
        m = i

    return r
