import json
from typing import Iterable, List, Mapping

from rich.table import Table


class Format:
    """Renders candidate records as JSON, CSV, a plain list or a rich table."""

    cols = ['kind', 'fqdn', 'tld']

    def __init__(self, domains: Iterable[Mapping] = (), unicode: bool = False):
        self.domains: List[dict] = [self._record(d, unicode) for d in domains]

    @staticmethod
    def _record(domain: Mapping, unicode: bool) -> dict:
        if hasattr(domain, 'to_dict'):
            return domain.to_dict(unicode=unicode)
        record = dict(domain)
        if 'kind' in record:
            record['kind'] = str(record['kind'])
        return record

    def json(self, indent=2, sort_keys=True):
        return json.dumps(self.domains, indent=indent, sort_keys=sort_keys, ensure_ascii=False)

    def csv(self):
        """
        Converts the domain data to a CSV string.
        """
        cols = list(self.cols)

        # Any extra keys (from callers enriching records) become trailing columns
        for domain in self.domains:
            for k in domain.keys() - set(cols):
                cols.append(k)
        cols = cols[:3] + sorted(cols[3:])

        csv = [','.join(cols)]
        for domain in self.domains:
            row = []
            for val in [domain.get(c, '') for c in cols]:
                if isinstance(val, list):
                    val = ';'.join(str(v) for v in val)
                val = str(val)
                if ',' in val or '"' in val:
                    val = '"{}"'.format(val.replace('"', '""'))
                row.append(val)
            csv.append(','.join(row))

        return '\n'.join(csv)

    def list(self):
        return '\n'.join(domain.get('fqdn', '') for domain in self.domains)

    def table(self) -> Table:
        """Results as a rich Table sorted by kind, then domain, with the total as caption."""
        table = Table(show_header=True, header_style="bold magenta",
                      caption=f"Total: {len(self.domains)} domains")
        table.add_column("Kind", style="dim")
        table.add_column("Domain", style="cyan", no_wrap=True)
        table.add_column("TLD")
        for domain in sorted(self.domains, key=lambda d: (str(d.get('kind', '')), d.get('fqdn', ''))):
            table.add_row(str(domain.get('kind', '')), domain.get('fqdn', ''), domain.get('tld', ''))
        return table
