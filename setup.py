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

from setuptools import setup
import io

setup (
        # Base info
        name = "specialize",
        version = "0.1",
        author = "François GINDRAUD",
        author_email = "francois.gindraud@gmail.com",

        # Code content
        packages = ["specialize"],
        install_requires = ["Jinja2>=3.0"],
        extras_require = {
            "test": ["pytest"]
            },
        entry_points = {
            "console_scripts" : [
                "specialize = specialize:main"
                ]
            },

        # Metadata
        description = "Type specialization code generator",
        long_description = io.open ("Readme.md", encoding = "utf-8").read (),
        long_description_content_type = "text/markdown",
        license = "MIT",
        python_requires = ">=3.6",

        # Classification
        classifiers = [
            "Development Status :: 4 - Beta",
            "License :: OSI Approved :: MIT License",
            "Intended Audience :: Developers",
            "Operating System :: Unix",
            "Programming Language :: Python :: 3",
            "Topic :: Software Development :: Code Generators",
            "Topic :: Text Processing :: General"
            ]
        )
