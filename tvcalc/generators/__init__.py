from .build import generate_site_files, generate_sitemap, generate_robots
from .sitemap_generator import build_sitemap, write_sitemap, render_sitemap, read_post
from .robots_generator import emit_robots, render_robots

__all__ = [
    "generate_site_files",
    "generate_sitemap",
    "generate_robots",
    "build_sitemap",
    "write_sitemap",
    "render_sitemap",
    "read_post",
    "emit_robots",
    "render_robots",
]
