"""
LUMA client application state

LumaApp owns everything the screens show: the session user, the cached user
and artwork lists, the current view and the toast. Screens call its actions
and re-render from its attributes.

States:
- Unauthenticated (user is None): only the auth screen is reachable
- Authenticated: gallery (default), profile, and the studio for artists
"""
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from frontend.api import LumaAPI
from frontend.config import settings
from frontend.media import file_to_data_url
from frontend.models import ArtworkForm, Notification, Order, Role, SignupForm, View
from frontend.session import SessionStore

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
ImageSource = Union[str, Path, bytes]


class AuthError(Exception):
    """Login or signup rejected; shown to the user as a blocking alert"""


class ActionNotAllowed(Exception):
    """The current role may not perform this action"""


class NavigationError(Exception):
    """The requested view is not reachable in the current state"""


def available_views(role: Optional[Role]) -> Tuple[View, ...]:
    """Views reachable once logged in. Unknown role strings get the common views."""
    if role is Role.ARTIST:
        return (View.GALLERY, View.PROFILE, View.DASHBOARD)
    if role is Role.BUYER or role is Role.CURATOR or role is None:
        return (View.GALLERY, View.PROFILE)
    raise ValueError(f"Unhandled role: {role}")


def can_purchase(role: Optional[Role]) -> bool:
    return role is Role.BUYER


class LumaApp:
    def __init__(
        self,
        api: LumaAPI,
        session: Optional[SessionStore] = None,
        notification_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.api = api
        self.session = session or SessionStore()
        self.notification_seconds = (
            settings.NOTIFICATION_SECONDS if notification_seconds is None else notification_seconds
        )
        self._clock = clock

        self.user: Optional[Record] = None
        self.users: List[Record] = []
        self.artworks: List[Record] = []
        self.view: View = View.GALLERY
        self._notification: Optional[Notification] = None

    # State

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def role(self) -> Optional[Role]:
        return Role.of(self.user)

    @property
    def notification(self) -> Optional[str]:
        """Current toast text, None once it has expired"""
        if self._notification and self._notification.is_active(self._clock()):
            return self._notification.message
        return None

    def notify(self, message: str) -> None:
        self._notification = Notification(message, self._clock() + self.notification_seconds)

    def portfolio(self) -> List[Record]:
        """Artworks credited to the current user's display name"""
        if not self.user:
            return []
        return [art for art in self.artworks if art.get("artist") == self.user.get("name")]

    def find_artwork(self, art_id: Any) -> Optional[Record]:
        for art in self.artworks:
            if str(art.get("id")) == str(art_id):
                return art
        return None

    # Startup

    async def load(self) -> None:
        """Fetch both collections and restore a stored session"""
        self.users = await self.api.users.get_all()
        self.artworks = await self.api.art.get_all()

        session_user = self.session.get()
        if session_user:
            self.user = session_user
            logger.info(f"Session restored for {session_user.get('email')}")

    # Authentication

    def _login(self, user: Record) -> None:
        self.user = user
        self.session.set(user)
        self.notify(f"Welcome back, {user.get('name')}")

    def login(self, email: str, password: str) -> Record:
        """
        Log in against the loaded user list

        Raises:
            AuthError: If no user has exactly this email and password
        """
        for user in self.users:
            if user.get("email") == email and user.get("password") == password:
                self._login(user)
                return user
        raise AuthError("Invalid credentials")

    async def signup(self, form: Union[SignupForm, Record]) -> Optional[Record]:
        """
        Create an account and log straight into it

        The duplicate-email check runs against the cached user list before any
        request is made; the server does not check again.

        Returns:
            The created user, or None if the server call failed

        Raises:
            AuthError: If a loaded user already has this email
        """
        if not isinstance(form, SignupForm):
            form = SignupForm.model_validate(form)

        if any(user.get("email") == form.email for user in self.users):
            raise AuthError("Email taken!")

        created = await self.api.users.add({**form.model_dump(), "orders": []})
        if created is None:
            self.notify("Failed to create account")
            return None

        self.users = [*self.users, created]
        self._login(created)
        return created

    def logout(self) -> None:
        self.user = None
        self.session.clear()
        self.view = View.GALLERY

    def navigate(self, view: Union[View, str]) -> None:
        view = View(view)
        if not self.is_authenticated:
            raise NavigationError("Log in to continue")
        if view not in available_views(self.role):
            raise NavigationError(f"The {view.value} view is not available to this account")
        self.view = view

    def _require_user(self) -> Record:
        if self.user is None:
            raise AuthError("Log in to continue")
        return self.user

    # Profile

    async def update_user(self, fields: Record) -> Optional[Record]:
        """
        Merge fields into the current user and save them

        Returns:
            The user as stored by the server, or None if saving failed
        """
        updated = {**self._require_user(), **fields}

        result = await self.api.users.update(updated)
        if result is None:
            self.notify("Failed to update profile")
            return None

        self.user = result
        self.users = [result if user.get("id") == result.get("id") else user for user in self.users]
        self.session.set(result)
        self.notify("Profile Updated!")
        return result

    async def update_avatar(self, source: ImageSource) -> Optional[Record]:
        return await self.update_user({"avatar": file_to_data_url(source)})

    # Artworks

    async def upload_art(
        self, form: Union[ArtworkForm, Record], image: Optional[ImageSource] = None
    ) -> Optional[Record]:
        """
        Publish an artwork under the current user's display name

        Args:
            form: Title, price and category
            image: Image file or bytes; the placeholder image is used when omitted

        Returns:
            The created artwork, or None if the server call failed

        Raises:
            ActionNotAllowed: If the current user is not an artist
        """
        user = self._require_user()
        if self.role is not Role.ARTIST:
            raise ActionNotAllowed("Only artists can publish artwork.")

        if not isinstance(form, ArtworkForm):
            form = ArtworkForm.model_validate(form)

        new_art = {
            "artist": user.get("name"),
            "img": file_to_data_url(image) if image is not None else settings.PLACEHOLDER_IMAGE,
            **form.model_dump(),
        }

        result = await self.api.art.add(new_art)
        if result is None:
            self.notify("Failed to upload artwork")
            return None

        self.artworks = [result, *self.artworks]
        self.notify("Artwork Uploaded Successfully!")
        return result

    async def delete_art(self, art_id: Any) -> bool:
        """Remove one of the current artist's own artworks"""
        self._require_user()
        art = self.find_artwork(art_id)
        if self.role is not Role.ARTIST or art is None or art not in self.portfolio():
            raise ActionNotAllowed("You can only remove your own artwork.")

        if not await self.api.art.delete(art["id"]):
            self.notify("Failed to remove artwork")
            return False

        self.artworks = [a for a in self.artworks if a.get("id") != art["id"]]
        self.notify("Artwork Removed")
        return True

    async def buy(self, artwork: Record) -> Optional[Record]:
        """
        Place an order for an artwork

        The order is a snapshot of the artwork, prepended to the buyer's orders and
        saved through the profile update. The artwork itself is left as it is.

        Returns:
            The new order, or None if saving failed

        Raises:
            ActionNotAllowed: If the current user is not a buyer
        """
        user = self._require_user()
        if not can_purchase(self.role):
            raise ActionNotAllowed("Please create a Buyer account to purchase.")

        order = Order.from_artwork(artwork).model_dump()
        result = await self.update_user({"orders": [order, *(user.get("orders") or [])]})
        if result is None:
            return None

        self.notify("Order Placed! Check your Profile.")
        return order
