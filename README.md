# netron

The pieces of a small decentralized chat web application, as a plain Python
package with no third-party dependencies.

## Modules

- `netron.records`: `RecordId`, a `table:key` identifier. `RecordId.parse`
  raises `RecordIdError` (a `ValueError`) unless the text has exactly one
  colon; `RecordId.from_lenient` returns `unknown:unknown` instead.
  `to_json` / `from_json` use the form `{"tb":"meter","id":{"String":"12345"}}`.
  `Datetime` wraps a `datetime` in UTC (naive values are taken as UTC) and
  prints as ISO 8601.
- `netron.theme`: `Theme` (`LIGHT`, `DARK`, `SYSTEM`) and `ThemeContext`, which
  loads and saves the choice under the `"theme"` key of any mapping, cycles
  themes with `toggle()`, and gives `effective_theme()`, `document_class()`
  (`"dark"` or `"light"`) and `toggle_label()`.
- `netron.chat_state`: `ChatMessage`, `ActiveChat` (messages, online users,
  topic id), `current_timestamp()` in milliseconds and `short_id()`.
- `netron.chat`: `ChatPanel`, the chat view's state with `initialize_node`,
  `create_chat`, `join_chat`, `send_message` and `leave_chat`, each of which
  updates `status` and the active chat.
- `netron.pages`: `render_home()` and `render_profile(editor)` return HTML;
  `ProfileEditor` holds a `Profile` and a draft edited with `toggle_edit`,
  `update_username`, `update_bio` and `save`.
- `netron.server`: `create_app(config)` builds a WSGI application; also
  `ServerConfig`, `hello_world()`, `render_shell(body, title)` and
  `resolve_static_file(root, path)`.

## Install

```
pip install .
```

## Running the server

```
netron-server
```

Options: `--host` (default `0.0.0.0`), `--port` (default `8000`),
`--site-root` (default `target/site`) and `--log-level` (default `DEBUG`).
See `netron-server --help`.

The server answers:

- `GET /` and `GET /profile` with the home and profile pages in a full HTML
  document;
- `GET` or `POST /api/hello_world` with the JSON string `"Hey."`;
- `OPTIONS` on any path with `204` and CORS headers;
- other `GET`/`HEAD` paths with the matching file under the site root
  (a directory serves its `index.html`), or a `404 Not Found` page.

## Using the library

```python
from netron.records import RecordId
from netron.theme import ThemeContext

rid = RecordId.parse("meter:12345")
print(rid.table, rid.key, str(rid))   # meter 12345 meter:12345

storage = {}
ctx = ThemeContext.load(storage, system_prefers_dark=False)
ctx.toggle()                          # system -> dark
ctx.save(storage)
print(storage["theme"], ctx.document_class())   # dark dark
```

## What it does not do

- There is no peer-to-peer networking. `ChatPanel` starts a node only through
  a `node_spawner` callable you pass in; without one, creating or joining a
  chat only sets the status to "P2P chat only works in browser mode".
- The pages are static HTML. The document shell refers to
  `/pkg/netron.js` and `/pkg/netron.wasm` for browser-side behaviour, but
  these files are not part of the package; put them under the site root if
  you have them.
- The served profile page always shows a fresh default profile; nothing is
  stored between requests.

## Tests

```
pip install .[test]
pytest
```