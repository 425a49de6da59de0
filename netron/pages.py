"""The static home page and the editable profile page."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

_FEATURES = (
    ("Secure Messaging", "End-to-end encrypted communication"),
    ("Decentralized", "No central server, peer-to-peer connections"),
    ("Open Source", "Transparent and community-driven"),
)


@dataclass
class Profile:
    username: str = "Anonymous"
    bio: str = ""
    peer_id: str = "Not connected"


@dataclass
class ProfileEditor:
    """A profile plus the draft values edited before saving."""

    profile: Profile = field(default_factory=Profile)
    edit_mode: bool = False
    temp_username: str = ""
    temp_bio: str = ""

    def toggle_edit(self) -> None:
        """Enter edit mode with a fresh draft, or leave it discarding the draft."""
        if self.edit_mode:
            self.edit_mode = False
        else:
            self.temp_username = self.profile.username
            self.temp_bio = self.profile.bio
            self.edit_mode = True

    def update_username(self, value: str) -> None:
        self.temp_username = value

    def update_bio(self, value: str) -> None:
        self.temp_bio = value

    def save(self) -> None:
        self.profile.username = self.temp_username
        self.profile.bio = self.temp_bio
        self.edit_mode = False

    def bio_display(self) -> str:
        return self.profile.bio or "No bio set"


def render_home() -> str:
    cards = "".join(
        f'<div class="feature-card"><h3>{title}</h3><p>{text}</p></div>'
        for title, text in _FEATURES
    )
    return (
        '<div class="screen home-screen">'
        "<h1>Welcome to Netron</h1>"
        "<p>A decentralized communication platform</p>"
        f'<div class="features">{cards}</div>'
        "</div>"
    )


def _render_form(editor: ProfileEditor) -> str:
    return (
        '<div><form class="profile-form">'
        '<div class="form-group"><label for="username">Username</label>'
        f'<input id="username" type="text" value="{escape(editor.temp_username)}"'
        ' placeholder="Enter your username"/></div>'
        '<div class="form-group"><label for="bio">Bio</label>'
        '<textarea id="bio" placeholder="Tell us about yourself" rows="4">'
        f"{escape(editor.temp_bio)}</textarea></div>"
        '<div class="form-actions">'
        '<button type="submit" class="save-button"><span>\U0001f4be Save</span></button>'
        '<button type="button" class="cancel-button">Cancel</button>'
        "</div></form></div>"
    )


def _render_display(editor: ProfileEditor) -> str:
    fields = (
        ("Username:", "profile-value", editor.profile.username),
        ("Bio:", "profile-value", editor.bio_display()),
        ("Peer ID:", "profile-value peer-id", editor.profile.peer_id),
    )
    rows = "".join(
        f'<div class="profile-field"><label>{label}</label>'
        f'<span class="{css}">{escape(value)}</span></div>'
        for label, css, value in fields
    )
    return (
        f'<div class="profile-display">{rows}'
        '<button class="edit-button">Edit Profile</button></div>'
    )


def render_profile(editor: ProfileEditor) -> str:
    body = _render_form(editor) if editor.edit_mode else _render_display(editor)
    return (
        '<div class="screen profile-screen">'
        '<div class="profile-header"><div class="profile-avatar">\U0001f464</div>'
        "<h2>Profile Settings</h2></div>"
        f"{body}</div>"
    )