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
import stat
import tempfile

import jinja2

from .tree import base_name

HEADER = "// File generated by specialize. Do not edit.\n\n"
OUTPUT_EXTENSION = ".go"
OUTPUT_MODE = 0o644

class Error (Exception):
    pass
class ConfigError (Error):
    pass
class TemplateSourceError (Error):
    pass
class RenderError (Error):
    pass
class WriteError (Error):
    pass

def default_output (template_path):
    """ Output file next to the template : "pkg/foo.go.tmpl" -> "pkg/foo.go". """
    return os.path.join (os.path.dirname (template_path), base_name (template_path) + OUTPUT_EXTENSION)

class Specializer:
    """
    Specialization frontend class, wrapping a jinja2 template.
    """
    def __init__ (self, template_path):
        """
        Create a specializer by loading and compiling the template file at template_path.
        """
        env = jinja2.Environment (
                loader = jinja2.FileSystemLoader (os.path.dirname (template_path) or os.curdir),
                undefined = jinja2.StrictUndefined,
                autoescape = False,
                keep_trailing_newline = True)
        try:
            self.template = env.get_template (os.path.basename (template_path))
        except jinja2.TemplateNotFound:
            raise TemplateSourceError ("{}: no such file".format (template_path))
        except jinja2.TemplateSyntaxError as e:
            raise TemplateSourceError ("{}:{}: {}".format (template_path, e.lineno, e.message))
        except (jinja2.TemplateError, OSError, UnicodeDecodeError) as e:
            raise TemplateSourceError ("{}: {}".format (template_path, e))

    def render (self, top):
        """
        Renders the template with the specialization tree top.
        Fields of top (Name, X) are the template top-level variables.
        Returns the generated text, header included.
        """
        try:
            return HEADER + self.template.render (top._asdict ())
        except Exception as e:
            raise RenderError (str (e))

class SpecializerOutput:
    """
    Represent the generated file.
    Content goes to a temporary file in the destination directory, which replaces the destination on commit.
    A failed generation never leaves a partial file at the destination.
    """
    def __init__ (self, filename):
        self.name = filename
        try:
            fd, self.tmp_name = tempfile.mkstemp (
                    prefix = "." + os.path.basename (filename) + ".",
                    dir = os.path.dirname (filename) or os.curdir)
            self.obj = open (fd, "w", encoding = "utf-8", errors = "surrogateescape")
        except OSError as e:
            raise WriteError (str (e))
    def commit (self):
        try:
            self.obj.close ()
            os.chmod (self.tmp_name, self.mode ())
            os.replace (self.tmp_name, self.name)
        except OSError as e:
            raise WriteError (str (e))
    def mode (self):
        """ Mode of the existing destination, or 0644 masked by the umask for a new file. """
        try:
            return stat.S_IMODE (os.stat (self.name).st_mode)
        except FileNotFoundError:
            umask = os.umask (0)
            os.umask (umask)
            return OUTPUT_MODE & ~umask
    def destroy (self):
        """ Removes the temporary file if not committed. """
        if not self.obj.closed:
            self.obj.close ()
        if os.path.exists (self.tmp_name):
            os.unlink (self.tmp_name)

def write (filename, text):
    """ Atomically writes text to filename. """
    out = SpecializerOutput (filename)
    try:
        try: out.obj.write (text)
        except (OSError, UnicodeError) as e: raise WriteError (str (e))
        out.commit ()
    finally:
        out.destroy ()
