"""
Text views

Each function renders one screen from explicit state and returns the text;
printing is left to the caller.
"""
from typing import Any, Dict, List, Optional

from frontend.models import CATEGORIES, Role, View

Record = Dict[str, Any]

RULE = "-" * 60


def _avatar(user: Record) -> str:
    if user.get("avatar"):
        return "[avatar]"
    name = user.get("name") or "?"
    return f"({name[:1]})"


def render_auth(signup: bool = False) -> str:
    lines = [
        "LUMA GALLERY",
        "Members Only Access",
        RULE,
    ]
    if signup:
        lines += [
            "Sign Up: full name, role (buyer / artist / curator),",
            "shipping address, phone number, short bio, email, password",
            "[Create Account]",
        ]
    else:
        lines += ["Log In: email, password", "[Enter Gallery]"]
    return "\n".join(lines)


def render_toast(message: Optional[str]) -> str:
    return f"* {message}" if message else ""


def render_nav(user: Record, view: View, role: Optional[Role]) -> str:
    def tab(label: str, target: View) -> str:
        return f"[{label}]" if view is target else label

    tabs = [tab("Gallery", View.GALLERY)]
    if role is Role.ARTIST:
        tabs.append(tab("Studio", View.DASHBOARD))

    role_label = str(user.get("role") or "").upper()
    return f"LUMA ULTIMATE | {'  '.join(tabs)} | {_avatar(user)} {user.get('name')} ({role_label})"


def render_gallery(artworks: List[Record], role: Optional[Role]) -> str:
    lines = ["Live Collection", RULE]
    for art in artworks:
        lines.append(f"#{art.get('id')}  {art.get('title')}")
        lines.append(f"    {art.get('category')} by {art.get('artist')}")
        if role is Role.BUYER:
            lines.append(f"    Buy ${art.get('price')}")
    if not artworks:
        lines.append("Nothing on display yet.")
    return "\n".join(lines)


def _render_orders(user: Record) -> List[str]:
    lines = ["My Collection"]
    orders = user.get("orders") or []
    if not orders:
        lines.append("No orders found. Go to the Gallery to buy art!")
    for order in orders:
        lines.append(f"  {order.get('title')}  ${order.get('price')}")
        lines.append(f"    Purchased on {order.get('date')}")
    return lines


def _render_portfolio(user: Record, artworks: List[Record]) -> List[str]:
    # matched by current display name, renaming orphans earlier uploads
    mine = [art for art in artworks if art.get("artist") == user.get("name")]
    lines = ["My Portfolio"]
    if not mine:
        lines.append("You haven't uploaded any art yet. Go to Studio!")
    for art in mine:
        lines.append(f"  #{art.get('id')}  {art.get('title')}  ${art.get('price')}")
    return lines


def render_profile(user: Record, artworks: List[Record], role: Optional[Role]) -> str:
    lines = [
        f"{_avatar(user)} {user.get('name')}",
        f"{user.get('email')}",
        f"Role: {str(user.get('role') or '').upper()}",
        RULE,
        f"Address: {user.get('address') or 'No address set'}",
        f"Phone: {user.get('phone') or 'No phone set'}",
        f"\"{user.get('bio') or 'No bio available'}\"",
        RULE,
    ]

    if role is Role.BUYER:
        lines += _render_orders(user)
    elif role is Role.ARTIST:
        lines += _render_portfolio(user, artworks)
    elif role is Role.CURATOR or role is None:
        pass
    else:
        raise ValueError(f"Unhandled role: {role}")

    return "\n".join(lines)


def render_dashboard(user: Record) -> str:
    return "\n".join([
        "Artist Studio",
        RULE,
        f"Publishing as: {user.get('name')}",
        "Image: drop a file path, or leave empty for the placeholder",
        "Fields: artwork title, price ($), category "
        f"({' / '.join(CATEGORIES)})",
        "[Publish Artwork]",
    ])


def render_screen(
    user: Optional[Record],
    view: View,
    role: Optional[Role],
    artworks: List[Record],
    notification: Optional[str] = None,
) -> str:
    """Whole screen for the current state"""
    if user is None:
        body = render_auth()
    elif view is View.GALLERY:
        body = render_gallery(artworks, role)
    elif view is View.PROFILE:
        body = render_profile(user, artworks, role)
    elif view is View.DASHBOARD:
        body = render_dashboard(user)
    else:
        raise ValueError(f"Unhandled view: {view}")

    parts = [render_toast(notification)]
    if user is not None:
        parts.append(render_nav(user, view, role))
    parts.append(body)
    return "\n\n".join(part for part in parts if part)
