""" Tests for the specialize command line interface. """

import os

import pytest

from specialize import main, generate, ConfigError
from specialize.compiler import HEADER

TEMPLATE = "package {{ Name }}\n// {{ X|length }}{% for x in X %} {{ x.Name }}:{{ x.Y|length }}{% endfor %}\n"

@pytest.fixture
def pkg (tmp_path):
    """ A package directory holding a foo.go.tmpl template. """
    (tmp_path / "foo.go.tmpl").write_text (TEMPLATE, encoding = "utf-8")
    return tmp_path

class TestMain:
    def test_default_output (self, pkg):
        assert main (["--input={}".format (pkg / "foo.go.tmpl"), "--x=int,float32", "--y=integers"]) == 0
        assert (pkg / "foo.go").read_text () == HEADER + "package foo\n// 2 Int:10 Float32:10\n"

    def test_output (self, pkg, capsys):
        out = pkg / "generated.go"
        assert main (["--input", str (pkg / "foo.go.tmpl"), "--x", "floats", "--output", str (out)]) == 0
        assert out.read_text () == HEADER + "package foo\n// 2 Float32:0 Float64:0\n"
        assert not (pkg / "foo.go").exists ()
        assert capsys.readouterr ().out == ""

    def test_short_options (self, pkg):
        assert main (["-i", str (pkg / "foo.go.tmpl"), "-x", "int", "-y", "int", "-z", "int"]) == 0
        assert (pkg / "foo.go").exists ()

    def test_no_input (self, capsys):
        with pytest.raises (SystemExit) as e:
            main (["--x=int"])
        assert e.value.code != 0
        err = capsys.readouterr ().err
        assert "usage:" in err
        assert "no template file" in err

    @pytest.mark.parametrize ("args", [[], ["--x="], ["--x= , ,"]])
    def test_no_types (self, pkg, capsys, args):
        with pytest.raises (SystemExit) as e:
            main (["--input={}".format (pkg / "foo.go.tmpl")] + args)
        assert e.value.code != 0
        err = capsys.readouterr ().err
        assert "usage:" in err
        assert "no specialization types" in err
        assert not (pkg / "foo.go").exists ()

    def test_template_parse_failure (self, pkg, capsys):
        (pkg / "bad.tmpl").write_text ("{% if X %}")
        assert main (["--input={}".format (pkg / "bad.tmpl"), "--x=int"]) == 1
        assert "template parse failed" in capsys.readouterr ().err
        assert not (pkg / "bad.go").exists ()

    def test_missing_template (self, pkg, capsys):
        assert main (["--input={}".format (pkg / "missing.tmpl"), "--x=int"]) == 1
        assert "template parse failed" in capsys.readouterr ().err

    def test_render_failure_keeps_output (self, pkg, capsys):
        (pkg / "bad.tmpl").write_text ("{{ X[0].Undefined }}")
        (pkg / "bad.go").write_text ("previous")
        assert main (["--input={}".format (pkg / "bad.tmpl"), "--x=int"]) == 1
        assert "specialization failed" in capsys.readouterr ().err
        assert (pkg / "bad.go").read_text () == "previous"
        assert sorted (os.listdir (str (pkg))) == ["bad.go", "bad.tmpl", "foo.go.tmpl"]

    def test_undecodable_type_bytes_kept (self, pkg):
        raw = b"\xff".decode ("utf-8", "surrogateescape")
        assert main (["--input={}".format (pkg / "foo.go.tmpl"), "--x={}".format (raw)]) == 0
        assert b"// 1 \xff:0\n" in (pkg / "foo.go").read_bytes ()

    def test_write_failure (self, pkg, capsys):
        out = pkg / "missing" / "foo.go"
        assert main (["--input={}".format (pkg / "foo.go.tmpl"), "--x=int", "--output={}".format (out)]) == 1
        assert "write failed" in capsys.readouterr ().err

class TestGenerate:
    def test_returns_output (self, pkg):
        output = generate (str (pkg / "foo.go.tmpl"), "int")
        assert output == os.path.join (str (pkg), "foo.go")
        assert os.path.isfile (output)

    def test_z_without_y (self, pkg):
        (pkg / "z.tmpl").write_text ("{% for x in X %}{{ x.Y|length }}{% endfor %}")
        generate (str (pkg / "z.tmpl"), "int,string", z = "floats")
        assert (pkg / "z.go").read_text () == HEADER + "00"

    def test_config_errors (self, pkg):
        with pytest.raises (ConfigError):
            generate ("", "int")
        with pytest.raises (ConfigError):
            generate (str (pkg / "foo.go.tmpl"), "")
