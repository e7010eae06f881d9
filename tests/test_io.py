# tests/test_io.py  (input acquisition and serializers)
import io
import json
import yaml
from types import SimpleNamespace as NS

from colkit.config import TableConfig
from colkit.table import Table
from colkit.utils.io import (
    format_csv, format_html, format_json, format_yaml, iter_output, read_lines, write_table,
)

def _tbl():
    return Table(headers=["Name", "Age"], rows=[["Alice", "30"], ["Bob", "25"]],
                 selected_columns=[0, 1])

class _TTY(io.StringIO):
    def isatty(self):
        return True

# ---------- INPUT ----------

def test_read_lines_from_stdin_strips():
    assert read_lines(None, stdin=io.StringIO("  a b \nc\n")) == ["a b", "c"]

def test_read_lines_file_plus_piped_stdin(tmp_path):
    p = tmp_path / "in.txt"
    p.write_text("Name Age\nAlice 30\n", encoding="utf-8")
    assert read_lines(str(p), stdin=io.StringIO("Bob 25\n")) == ["Name Age", "Alice 30", "Bob 25"]

def test_read_lines_file_skips_terminal_stdin(tmp_path):
    p = tmp_path / "in.txt"
    p.write_text("x\n", encoding="utf-8")
    assert read_lines(str(p), stdin=_TTY("never read\n")) == ["x"]

# ---------- SERIALIZERS ----------

def test_csv_with_header_and_quoting():
    t = Table(headers=["k", "v"], rows=[["a,b", "1"], ['say "hi"', ""]])
    assert format_csv(t) == 'k,v\n"a,b",1\n"say ""hi""",\n'

def test_csv_without_header():
    t = Table(headers=[], rows=[["x", "y"]])
    assert format_csv(t) == "x,y\n"

def test_json_records_strip_ansi():
    t = Table(headers=["\x1b[1mName\x1b[0m", "Age"], rows=[["\x1b[31mAlice\x1b[0m", "30"]])
    assert json.loads(format_json(t)) == [{"Name": "Alice", "Age": "30"}]

def test_json_title_column():
    data = json.loads(format_json(_tbl(), title_column=True))
    assert data == {"Alice": {"Age": "30"}, "Bob": {"Age": "25"}}

def test_json_without_header_is_list_of_lists():
    t = Table(headers=[], rows=[["a", "b"]])
    assert json.loads(format_json(t, title_column=True)) == [["a", "b"]]

def test_yaml_records_keep_column_order():
    text = format_yaml(_tbl())
    assert yaml.safe_load(text) == [{"Name": "Alice", "Age": "30"}, {"Name": "Bob", "Age": "25"}]
    assert text.index("Name") < text.index("Age")
    assert yaml.safe_load(format_yaml(_tbl(), title_column=True)) == {
        "Alice": {"Age": "30"}, "Bob": {"Age": "25"},
    }

def test_html_table_structure_and_escaping():
    t = Table(headers=["a"], rows=[["<b>&"]])
    out = format_html(t)
    assert out.startswith("<table>\n  <thead>")
    assert "      <th>a</th>" in out
    assert "      <td>&lt;b&gt;&amp;</td>" in out
    assert out.rstrip().endswith("</table>")
    assert "<thead>" not in format_html(Table(headers=[], rows=[["x"]]))

def test_iter_output_dispatches_on_format():
    text = "".join(iter_output(_tbl(), TableConfig.from_args(NS(csv=True))))
    assert text == "Name,Age\nAlice,30\nBob,25\n"
    text = "".join(iter_output(_tbl(), TableConfig()))
    assert text.splitlines()[1] == " Alice    30 "

def test_write_table_to_file(tmp_path):
    p = tmp_path / "out.txt"
    write_table(_tbl(), TableConfig.from_args(NS(json=True)), str(p))
    assert json.loads(p.read_text(encoding="utf-8"))[1]["Name"] == "Bob"
