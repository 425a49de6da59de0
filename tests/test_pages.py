from netron.pages import Profile, ProfileEditor, render_home, render_profile


def test_profile_defaults():
    profile = Profile()
    assert profile.username == "Anonymous"
    assert profile.bio == ""
    assert profile.peer_id == "Not connected"


def test_bio_display_when_empty():
    assert ProfileEditor().bio_display() == "No bio set"


def test_bio_display_when_set():
    editor = ProfileEditor(Profile(bio="hello"))
    assert editor.bio_display() == "hello"


def test_toggle_edit_copies_profile_into_draft():
    editor = ProfileEditor(Profile(username="alice", bio="about"))
    editor.toggle_edit()
    assert editor.edit_mode is True
    assert (editor.temp_username, editor.temp_bio) == ("alice", "about")


def test_cancel_discards_draft():
    editor = ProfileEditor()
    editor.toggle_edit()
    editor.update_username("bob")
    editor.update_bio("draft")
    editor.toggle_edit()
    assert editor.edit_mode is False
    assert editor.profile.username == "Anonymous"
    assert editor.profile.bio == ""


def test_save_applies_draft():
    editor = ProfileEditor()
    editor.toggle_edit()
    editor.update_username("bob")
    editor.update_bio("writes code")
    editor.save()
    assert editor.edit_mode is False
    assert editor.profile.username == "bob"
    assert editor.bio_display() == "writes code"


def test_reentering_edit_refreshes_draft():
    editor = ProfileEditor()
    editor.toggle_edit()
    editor.update_username("stale")
    editor.toggle_edit()
    editor.toggle_edit()
    assert editor.temp_username == "Anonymous"


def test_render_home_lists_features():
    page = render_home()
    assert "Welcome to Netron" in page
    assert page.count('class="feature-card"') == 3
    assert "Decentralized" in page


def test_render_profile_display_mode():
    page = render_profile(ProfileEditor())
    assert "Edit Profile" in page
    assert "No bio set" in page
    assert "Not connected" in page
    assert "<form" not in page


def test_render_profile_edit_mode_escapes_draft():
    editor = ProfileEditor()
    editor.toggle_edit()
    editor.update_username('<b>"x"</b>')
    page = render_profile(editor)
    assert "<form" in page
    assert "<b>" not in page
    assert "&lt;b&gt;" in page