# Copyright (c) 2015 Francois GINDRAUD
# 
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE
# LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
# OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION
# WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

import re

SLICE_PREFIX = "[]"
SLICE_SUFFIX = "Slice"

# Word starts : first char, or char after anything but a letter or digit
WORD_START = re.compile (r"(?<![^\W_])\w")

def make_name (t):
    """
    Creates a capitalized identifier from a type.
    "int" -> "Int", "[]byte" -> "ByteSlice", "foo.Baz" -> "Foo_Baz".
    """
    if t.startswith (SLICE_PREFIX):
        return make_name (t[len (SLICE_PREFIX):] + SLICE_SUFFIX)
    t = t.replace (".", "_").replace ("[", "_").replace ("]", "_")
    return WORD_START.sub (lambda m: m.group (0).upper (), t)
