"""Page directory resolution for file-based routing.

Every layer contributes a ``pages/`` directory; file names define the
URL patterns and directory nesting defines route nesting::

    pages/
      index.vue              # /                 name "index"
      users.vue              # /users            name "users"
      users/
        index.vue            #   ""              name "users"  (parent name dropped)
        [id].vue             #   :id()           name "users-id"
        [[tab]].vue          #   :tab?           name "users-tab"
      docs/
        [...slug].vue        # /docs/:slug(.*)*  name "docs-slug"
"""

from roost.pages.manifest import create_data_manifest, render_data_manifest, split_data_routes
from roost.pages.meta import extract_route_name, extract_script_content
from roost.pages.resolve import resolve_page_routes, resolve_routes, scan_layers, scan_pages

__all__ = [
    "create_data_manifest",
    "extract_route_name",
    "extract_script_content",
    "render_data_manifest",
    "resolve_page_routes",
    "resolve_routes",
    "scan_layers",
    "scan_pages",
    "split_data_routes",
]
