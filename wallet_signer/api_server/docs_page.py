"""
HTML documentation page served at GET /.

The endpoint table and the "Try it" forms are rendered from ENDPOINT_DOCS so
the page lists exactly the routes the server registers. Each form issues a GET
with its fields as query parameters and prints the JSON envelope below it.
"""

from __future__ import annotations

import html
from dataclasses import dataclass


@dataclass(frozen=True)
class EndpointDoc:
    path: str
    params: tuple[str, ...]
    description: str
    example: str

    @property
    def form_id(self) -> str:
        return "try" + self.path.replace("/", "-")


ENDPOINT_DOCS: tuple[EndpointDoc, ...] = (
    EndpointDoc("/sign", ("key", "message"), "Sign a message with an Ethereum private key (EIP-191).",
                "/sign?key=0x...&message=hello"),
    EndpointDoc("/verify", ("signature", "message", "address?"),
                "Recover the Ethereum signer address. isValid compares against address when given.",
                "/verify?signature=0x...&message=hello"),
    EndpointDoc("/generate-eth", (), "New Ethereum wallet from a fresh 12-word mnemonic (m/44'/60'/0'/0/0).",
                "/generate-eth"),
    EndpointDoc("/generate-sui", (), "New Sui Ed25519 wallet.", "/generate-sui"),
    EndpointDoc("/eth-key-to-wallet", ("privateKey",),
                "Address and public keys for an Ethereum private key (with or without 0x).",
                "/eth-key-to-wallet?privateKey=0x..."),
    EndpointDoc("/sui-key-to-address", ("privateKey",),
                "Address and public key for a 64 hex character Ed25519 private key.",
                "/sui-key-to-address?privateKey=..."),
    EndpointDoc("/sui-sign", ("privateKey", "message"), "Sign a Sui personal message.",
                "/sui-sign?privateKey=...&message=hello"),
    EndpointDoc("/sui-verify", ("signature", "message", "address?"),
                "Verify a Sui personal message signature.",
                "/sui-verify?signature=...&message=hello"),
)

# Not passed through str.format, so braces are literal.
_SCRIPT = """
  <script>
    async function tryEndpoint(form) {
      const out = form.querySelector('pre');
      const query = new URLSearchParams();
      for (const input of form.querySelectorAll('input')) {
        if (input.value !== '') query.append(input.name, input.value);
      }
      const url = form.dataset.path + (query.toString() ? '?' + query.toString() : '');
      out.textContent = 'GET ' + url + ' ...';
      try {
        const response = await fetch(url);
        const body = await response.json();
        out.textContent = response.status + '\\n' + JSON.stringify(body, null, 2);
      } catch (error) {
        out.textContent = 'Request failed: ' + error.message;
      }
    }
  </script>
"""

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
           max-width: 960px; margin: 0 auto; padding: 40px 20px; color: #1e293b; background: #f8fafc; }}
    h1 {{ margin-bottom: 4px; }}
    table {{ width: 100%; border-collapse: collapse; margin-top: 24px; }}
    th, td {{ text-align: left; padding: 8px 10px; border-bottom: 1px solid #e2e8f0; vertical-align: top; }}
    code {{ background: #e2e8f0; padding: 1px 4px; border-radius: 4px; }}
    .note {{ color: #64748b; }}
    form {{ background: #fff; border: 1px solid #e2e8f0; border-radius: 8px; padding: 12px 16px; margin: 12px 0; }}
    label {{ display: block; margin: 6px 0; }}
    input {{ width: 100%; padding: 6px; font-family: monospace; box-sizing: border-box; }}
    pre {{ background: #0f172a; color: #e2e8f0; padding: 10px; border-radius: 6px; overflow-x: auto;
          white-space: pre-wrap; word-break: break-all; }}
    pre:empty {{ display: none; }}
  </style>
</head>
<body>
  <h1>{title}</h1>
  <p class="note">Version {version}. All endpoints are GET with query parameters and return
  <code>{{"success": true, "data": ...}}</code> or <code>{{"success": false, "error": "..."}}</code>.</p>
  <table>
    <thead><tr><th>Path</th><th>Parameters</th><th>Description</th><th>Example</th></tr></thead>
    <tbody>
{rows}
    </tbody>
  </table>
  <h2>Try it</h2>
  <p class="note">Private keys are sent in the query string. Only use this service over a trusted connection.</p>
{forms}
{script}
</body>
</html>
"""


def _row(doc: EndpointDoc) -> str:
    params = ", ".join(f"<code>{html.escape(p)}</code>" for p in doc.params) or "&mdash;"
    return (
        f"      <tr><td><code>{html.escape(doc.path)}</code></td><td>{params}</td>"
        f"<td>{html.escape(doc.description)}</td><td><code>{html.escape(doc.example)}</code></td></tr>"
    )


def _form(doc: EndpointDoc) -> str:
    lines = [
        f'  <form id="{doc.form_id}" data-path="{html.escape(doc.path)}" '
        f'onsubmit="tryEndpoint(this); return false;">',
        f"    <strong><code>GET {html.escape(doc.path)}</code></strong>",
    ]
    for param in doc.params:
        # trailing ? marks an optional parameter
        name = param.rstrip("?")
        required = "" if param.endswith("?") else " required"
        lines.append(
            f'    <label>{html.escape(name)} <input name="{html.escape(name)}" autocomplete="off"{required}></label>'
        )
    lines.append('    <button type="submit">Send</button>')
    lines.append("    <pre></pre>")
    lines.append("  </form>")
    return "\n".join(lines)


def render_docs_page(title: str, version: str) -> str:
    return _PAGE.format(
        title=html.escape(title),
        version=html.escape(version),
        rows="\n".join(_row(d) for d in ENDPOINT_DOCS),
        forms="\n".join(_form(d) for d in ENDPOINT_DOCS),
        script=_SCRIPT,
    )
