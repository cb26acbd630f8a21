"""
LUMA Client - interactive shell

Connects to the LUMA Server, restores a stored session and lets the user
browse, buy and publish artwork from the terminal.
"""
import argparse
import asyncio
import getpass
import logging
import shlex
from pathlib import Path
from typing import List

from frontend.api import LumaAPI
from frontend.app import ActionNotAllowed, AuthError, LumaApp, NavigationError
from frontend.config import settings
from frontend.models import Role, View
from frontend.session import LocalStorage, SessionStore
from frontend.views import render_auth, render_screen

logger = logging.getLogger(__name__)

HELP = """Commands:
  login                 log in with email and password
  signup                create an account
  logout                end the session
  gallery | profile | studio
  buy <id>              buy an artwork (buyers)
  upload                publish an artwork (artists)
  delete <id>           remove one of your artworks (artists)
  avatar <path>         set your profile picture
  edit <field> <value>  change name, address, phone or bio
  help | quit"""

EDITABLE_FIELDS = ("name", "address", "phone", "bio")


async def ask(prompt: str, secret: bool = False) -> str:
    reader = getpass.getpass if secret else input
    return (await asyncio.to_thread(reader, prompt)).strip()


def show(app: LumaApp) -> None:
    print()
    print(render_screen(app.user, app.view, app.role, app.artworks, app.notification))


async def do_login(app: LumaApp) -> None:
    email = await ask("Email Address: ")
    password = await ask("Password: ", secret=True)
    app.login(email, password)


async def do_signup(app: LumaApp) -> None:
    print(render_auth(signup=True))
    form = {
        "name": await ask("Full Name: "),
        "role": (await ask("Role [buyer/artist/curator]: ")) or Role.BUYER.value,
        "address": await ask("Full Address (Shipping): "),
        "phone": await ask("Phone Number: "),
        "bio": await ask("Short Bio: "),
        "email": await ask("Email Address: "),
        "password": await ask("Password: ", secret=True),
    }
    await app.signup(form)


async def do_upload(app: LumaApp) -> None:
    image = await ask("Image path (empty for placeholder): ")
    form = {
        "title": await ask("Artwork Title: "),
        "price": await ask("Price ($): "),
        "category": (await ask("Category [Digital/Painting/Sculpture]: ")) or "Digital",
    }
    await app.upload_art(form, Path(image).expanduser() if image else None)


async def handle(app: LumaApp, argv: List[str]) -> bool:
    """Run one command. Returns False when the shell should exit."""
    command, args = argv[0].lower(), argv[1:]

    if command in ("quit", "exit"):
        return False
    if command == "help":
        print(HELP)
    elif command == "login":
        await do_login(app)
    elif command == "signup":
        await do_signup(app)
    elif command == "logout":
        app.logout()
    elif command in ("gallery", "profile"):
        app.navigate(View(command))
    elif command == "studio":
        app.navigate(View.DASHBOARD)
    elif command == "buy" and args:
        artwork = app.find_artwork(args[0])
        if artwork is None:
            print(f"No artwork #{args[0]}")
        else:
            await app.buy(artwork)
    elif command == "upload":
        await do_upload(app)
    elif command == "delete" and args:
        await app.delete_art(args[0])
    elif command == "avatar" and args:
        await app.update_avatar(Path(args[0]).expanduser())
    elif command == "edit" and len(args) >= 2 and args[0] in EDITABLE_FIELDS:
        await app.update_user({args[0]: " ".join(args[1:])})
    else:
        print(f"Unknown command: {' '.join(argv)} (try 'help')")
    return True


async def run_shell(api_base: str, session_file: Path) -> None:
    async with LumaAPI(base_url=api_base) as api:
        app = LumaApp(api, SessionStore(LocalStorage(session_file)))
        await app.load()
        show(app)

        while True:
            try:
                line = await ask("\nluma> ")
            except EOFError:
                break
            if not line:
                continue

            try:
                if not await handle(app, shlex.split(line)):
                    break
            except (AuthError, ActionNotAllowed, NavigationError) as e:
                # blocking alert
                print(f"\n!! {e}")
                continue
            except OSError as e:
                print(f"\n!! Could not read file: {e}")
                continue
            except ValueError as e:
                print(f"\n!! {e}")
                continue
            show(app)


def main():
    parser = argparse.ArgumentParser(description="LUMA gallery client")
    parser.add_argument(
        "--api-base",
        default=settings.API_BASE,
        help=f"Server API base URL (default {settings.API_BASE})",
    )
    parser.add_argument(
        "--session-file",
        type=Path,
        default=settings.SESSION_FILE,
        help="Local storage file holding the session",
    )
    parser.add_argument("--verbose", action="store_true", help="Show request logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        asyncio.run(run_shell(args.api_base, args.session_file))
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
