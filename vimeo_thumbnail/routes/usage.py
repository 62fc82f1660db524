"""Catch-all route describing how to use the service."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["usage"])

USAGE_HTML = """<!doctype html>
<html>
<head><title>Vimeo Thumbnail Redirect</title></head>
<body>
<h1>Vimeo Thumbnail Redirect</h1>
<p>Request <code>/v/&lt;video id&gt;</code> to be redirected to the thumbnail of a Vimeo video,
for example <code>/v/76979871</code>.</p>
<ul>
<li><code>s</code>: thumbnail size, one of <code>large</code> (default), <code>medium</code>, <code>small</code></li>
<li><code>sfb=false</code>: do not fall back to a smaller size when the requested one is missing</li>
<li><code>c=false</code>: ignore the cached redirect and ask Vimeo again</li>
</ul>
<p>Example: <code>/v/76979871?s=medium&amp;sfb=false</code></p>
</body>
</html>
"""


@router.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
async def usage_endpoint(path: str) -> HTMLResponse:
    """Return the usage hint for any path not handled by another route."""
    return HTMLResponse(USAGE_HTML)
