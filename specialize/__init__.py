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

from .typelist import expand, MACROS
from .naming import make_name
from .tree import Top, X, Y, Z, build, base_name
from .compiler import Specializer, Error, ConfigError, TemplateSourceError, RenderError, WriteError, default_output, write

__all__ = ["expand", "MACROS", "make_name", "Top", "X", "Y", "Z", "build", "base_name",
        "Specializer", "Error", "ConfigError", "TemplateSourceError", "RenderError", "WriteError",
        "default_output", "write", "generate", "main"]

def generate (template_path, x, y = None, z = None, output = None):
    """
    Specializes the template at template_path for comma-separated type lists x, y, z.

    Writes the generated code to output (default_output (template_path) if not given).
    Returns the output filename.
    Raises ConfigError for missing inputs, and TemplateSourceError, RenderError or WriteError for the failing stage.
    """
    if not template_path:
        raise ConfigError ("no template file")
    xs = expand (x)
    if len (xs) == 0:
        raise ConfigError ("no specialization types")
    if not output:
        output = default_output (template_path)

    top = build (base_name (template_path), xs, expand (y), expand (z))
    specializer = Specializer (template_path)
    write (output, specializer.render (top))
    return output

def main (argv = None):
    """
    Script interface entry point.

    Reads the commandline arguments, generates the specialized file and returns the exit status.
    """
    import sys
    import argparse

    parser = argparse.ArgumentParser (prog = "specialize",
            description = "type specialization code generator")
    parser.add_argument ("-x", "--x",
            metavar = "TYPES",
            help = "comma-separated list of X types")
    parser.add_argument ("-y", "--y",
            metavar = "TYPES",
            help = "comma-separated list of Y types (optional)")
    parser.add_argument ("-z", "--z",
            metavar = "TYPES",
            help = "comma-separated list of Z types (optional, requires Y types)")
    parser.add_argument ("-i", "--input",
            metavar = "TMPL",
            help = "template file")
    parser.add_argument ("-o", "--output",
            metavar = "OUT",
            help = "filename for generated code (default = <input dir>/<input base name>.go)")
    args = parser.parse_args (argv)

    try:
        generate (args.input, args.x, args.y, args.z, args.output)
    except ConfigError as e:
        parser.error (str (e))
    except TemplateSourceError as e:
        print ("specialize: template parse failed: {}".format (e), file = sys.stderr)
        return 1
    except RenderError as e:
        print ("specialize: specialization failed: {}".format (e), file = sys.stderr)
        return 1
    except WriteError as e:
        print ("specialize: write failed: {}".format (e), file = sys.stderr)
        return 1
    return 0