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

import os
import collections

from .naming import make_name

# Top-level object given to the template.
# Name is the base form of the template filename : "foo/bar.go.tmpl" -> "bar".
Top = collections.namedtuple ("Top", ["Name", "X"])

# Type entries of each dimension.
# Name is the identifier form of the type ("[]byte" -> "ByteSlice"), Type the textual type ("foo.Baz").
# Each X holds the same tuple of Y, each Y holds the same tuple of Z.
X = collections.namedtuple ("X", ["Name", "Type", "Y"])
Y = collections.namedtuple ("Y", ["Name", "Type", "Z"])
Z = collections.namedtuple ("Z", ["Name", "Type"])

def base_name (path):
    """ "foo/bar.go.tmpl" -> "bar". A leading dot is kept as part of the name. """
    name = os.path.basename (path)
    index = name.find (".")
    if index > 0:
        name = name[:index]
    return name

def build (name, xs, ys = (), zs = ()):
    """
    Builds the X x Y x Z specialization tree from expanded type lists.

    Z types are only reachable through Y entries, so they are ignored if there are no Y types.
    Sub tuples are built once and shared by all parent entries.
    """
    if len (xs) == 0:
        raise ValueError ("no specialization types")
    y_entries = ()
    if len (ys) > 0:
        z_entries = tuple (Z (make_name (t), t) for t in zs)
        y_entries = tuple (Y (make_name (t), t, z_entries) for t in ys)
    return Top (name, tuple (X (make_name (t), t, y_entries) for t in xs))
