# -*- coding: utf-8 -*-
import re

from preset_config import PRESET_NAME_META, MOD_CONTAINER, DISPLAY_NAME, LINK_FIELD, MOD_LIST_CLASS, SOURCE_CLASS

# Standard Arma 3 Launcher layout, used when a result has no source document to
# borrow its layout from.
DEFAULT_TEMPLATE = f"""<?xml version="1.0" encoding="utf-8"?>
<html>
  <!--Created by Arma 3 Launcher: https://arma3.com-->
  <head>
    <meta name="arma:Type" content="preset" />
    <meta name="{PRESET_NAME_META}" content="Unnamed" />
    <meta name="generator" content="Arma 3 Launcher - https://arma3.com" />
    <title>Arma 3</title>
    <style>
      body {{ background: #000; color: #fff; font-family: Segoe UI, Tahoma, Arial; }}
      .mod-list {{ background: #222; padding: 20px; }}
      .from-steam {{ color: #449EBD; }}
    </style>
  </head>
  <body>
    <h1>Arma 3  - Preset <strong>Unnamed</strong></h1>
    <p class="before-list">
      <em>To import this preset, drag this file onto the Launcher window. Or click the MODS tab, then PRESET in the top right, then IMPORT at the bottom, and finally select this file.</em>
    </p>
    <div class="{MOD_LIST_CLASS}">
      <table>
      </table>
    </div>
  </body>
</html>
"""

# Anchors into the raw template text. Everything outside the matched groups is
# copied through untouched.
MOD_TABLE_RE = re.compile(
    r"""(<div[^>]*class=(?:"|')?[^>"']*""" + re.escape(MOD_LIST_CLASS) + r"""[^>"']*(?:"|')?[^>]*>[\s\S]*?<table[^>]*>)([\s\S]*?)(</table>)""",
    re.IGNORECASE)
PRESET_NAME_RE = re.compile(
    r"""(?P<head><meta\s+name=(?P<q1>["'])""" + re.escape(PRESET_NAME_META) + r"""(?P=q1)\s+content=(?P<q2>["']))(?P<value>.*?)(?P=q2)""",
    re.IGNORECASE)
HEADING_RE = re.compile(r"(<h1[\s\S]*?<strong>)([\s\S]*?)(</strong>[\s\S]*?</h1>)", re.IGNORECASE)

def escape_html(value):
    return (str(value).replace("&", "&amp;").replace("<", "&lt;")
            .replace(">", "&gt;").replace('"', "&quot;"))

def quote_attr(escaped, quote):
    """Single-quoted attribute values also need the apostrophe escaped."""
    return escaped.replace("'", "&#39;") if quote == "'" else escaped

def render_mod_row(mod):
    source = f'<span class="{SOURCE_CLASS}">{escape_html(mod["source"])}</span>' if mod.get("source") else ""
    link = f'<a href="{escape_html(mod["link"])}" data-type="{LINK_FIELD}">{escape_html(mod["link"])}</a>' if mod.get("link") else ""
    return (f'        <tr data-type="{MOD_CONTAINER}">\n'
            f'          <td data-type="{DISPLAY_NAME}">{escape_html(mod["name"])}</td>\n'
            f'          <td>\n'
            f'            {source}\n'
            f'          </td>\n'
            f'          <td>\n'
            f'            {link}\n'
            f'          </td>\n'
            f'        </tr>\n')

def render_preset(template_html, mods, preset_name=None):
    """
    Rebuilds a preset document from a template.

    The first mod-list table is refilled with the given mods and, when a name
    is given, the PresetName meta and the <h1><strong> title are rewritten.
    Missing anchors are skipped without error.
    """
    rows = "".join(render_mod_row(m) for m in mods)
    out = MOD_TABLE_RE.sub(lambda m: m.group(1) + "\n" + rows + "      " + m.group(3), template_html, count=1)

    if preset_name:
        safe_name = escape_html(preset_name)
        out = PRESET_NAME_RE.sub(lambda m: m.group("head") + quote_attr(safe_name, m.group("q2")) + m.group("q2"), out, count=1)
        out = HEADING_RE.sub(lambda m: m.group(1) + safe_name + m.group(3), out, count=1)

    return out
