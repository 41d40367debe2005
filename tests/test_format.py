import io
import json

import pytest
from rich.console import Console

from domaintwist.services.format import Format
from domaintwist.services.permutation import Candidate, MutationKind


@pytest.fixture
def domains():
    return [
        Candidate("xample.com", "com", MutationKind.OMISSION),
        Candidate("example.net", "net", MutationKind.TLD_VARIATION),
    ]


def test_csv(domains):
    assert Format(domains).csv() == "kind,fqdn,tld\nOmission,xample.com,com\nTldVariation,example.net,net"


def test_csv_extra_columns_and_quoting():
    records = [
        {"kind": "Omission", "fqdn": "a.com", "tld": "com", "dns_a": ["1.2.3.4", "5.6.7.8"], "note": 'say "hi", bye'},
    ]
    lines = Format(records).csv().split("\n")
    assert lines[0] == "kind,fqdn,tld,dns_a,note"
    assert lines[1] == 'Omission,a.com,com,1.2.3.4;5.6.7.8,"say ""hi"", bye"'


def test_json(domains):
    data = json.loads(Format(domains).json())
    assert data == [
        {"fqdn": "xample.com", "kind": "Omission", "tld": "com"},
        {"fqdn": "example.net", "kind": "TldVariation", "tld": "net"},
    ]


def test_json_unicode():
    idn = [Candidate("xn--xample-9ua.com", "com", MutationKind.HOMOGLYPH)]
    assert "éxample.com" in Format(idn, unicode=True).json()
    assert "xn--xample-9ua.com" in Format(idn).json()


def test_list(domains):
    assert Format(domains).list() == "xample.com\nexample.net"


def _render(table):
    console = Console(file=io.StringIO(), width=100)
    console.print(table)
    return console.file.getvalue()


def test_table(domains):
    table = Format(domains).table()
    assert [column.header for column in table.columns] == ["Kind", "Domain", "TLD"]
    assert list(table.columns[0].cells) == ["Omission", "TldVariation"]
    assert list(table.columns[1].cells) == ["xample.com", "example.net"]
    assert table.caption == "Total: 2 domains"


def test_table_renders_as_text(domains):
    text = _render(Format(domains).table())
    assert text.index("Omission") < text.index("TldVariation")
    assert "example.net" in text
    assert "Total: 2 domains" in text


def test_table_tolerates_partial_records():
    table = Format([{"fqdn": "a.com"}]).table()
    assert list(table.columns[1].cells) == ["a.com"]
    assert list(table.columns[2].cells) == [""]
    assert Format([{"fqdn": "a.com"}]).list() == "a.com"


def test_empty():
    assert Format([]).csv() == "kind,fqdn,tld"
    assert Format([]).list() == ""
    assert Format([]).table().row_count == 0
    assert "Total: 0 domains" in _render(Format([]).table())
