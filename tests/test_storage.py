"""
Tests for the JSON file record store.
"""
import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from backend.core import IdAllocator, RecordNotFoundError, RecordStore, SEED_ARTWORKS


def read_json(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class TestInitialize:
    """Bootstrapping the data directory."""

    def test_creates_directory_and_files(self, tmp_path):
        data_dir = tmp_path / "nested" / "data"
        store = RecordStore(data_dir)
        store.initialize()

        assert read_json(data_dir / "users.json") == []
        assert read_json(data_dir / "art.json") == SEED_ARTWORKS

    def test_seed_artworks(self, store):
        titles = [art["title"] for art in store.list_artworks()]
        assert titles == ["Cyber Punk City", "Abstract Blue"]
        assert store.list_artworks()[0]["price"] == 2400

    def test_existing_files_are_kept(self, data_dir):
        data_dir.mkdir(parents=True)
        (data_dir / "art.json").write_text("[]", encoding="utf-8")
        (data_dir / "users.json").write_text('[{"id": 5, "email": "a@x.com"}]', encoding="utf-8")

        store = RecordStore(data_dir)
        store.initialize()

        assert store.list_artworks() == []
        assert store.list_users() == [{"id": 5, "email": "a@x.com"}]

    def test_files_use_two_space_indent(self, store):
        text = store.artworks.path.read_text(encoding="utf-8")
        assert text.startswith('[\n  {\n    "id": 1,')


class TestUnreadableStorage:
    """Broken or missing files read as empty collections."""

    def test_missing_file_is_empty(self, tmp_path):
        store = RecordStore(tmp_path / "never-initialized")
        assert store.list_users() == []
        assert store.list_artworks() == []

    def test_invalid_json_is_empty(self, store):
        store.users.path.write_text("{not json", encoding="utf-8")
        assert store.list_users() == []

    def test_non_array_is_empty(self, store):
        store.artworks.path.write_text('{"id": 1}', encoding="utf-8")
        assert store.list_artworks() == []

    def test_array_of_non_objects_is_empty(self, store):
        store.users.path.write_text("[1, 2]", encoding="utf-8")
        assert store.list_users() == []

    def test_mutations_over_non_object_entries_do_not_crash(self, store):
        store.users.path.write_text("[1, 2]", encoding="utf-8")
        store.artworks.path.write_text('[{"id": 1}, "two"]', encoding="utf-8")

        with pytest.raises(RecordNotFoundError):
            store.update_user(1, {"name": "X"})
        store.delete_artwork(1)

        assert store.list_artworks() == []


class TestUsers:
    """User insert and update."""

    def test_insert_assigns_id_and_appends(self, store):
        first = store.insert_user({"email": "a@x.com"})
        second = store.insert_user({"email": "b@x.com"})

        assert isinstance(first["id"], int)
        assert second["id"] != first["id"]
        assert [u["email"] for u in store.list_users()] == ["a@x.com", "b@x.com"]

    def test_insert_overwrites_supplied_id(self, tmp_path):
        store = RecordStore(tmp_path, id_allocator=IdAllocator(clock=lambda: 123456))
        store.initialize()

        user = store.insert_user({"id": 1, "email": "a@x.com"})

        assert user["id"] == 123456
        assert store.list_users() == [{"id": 123456, "email": "a@x.com"}]

    def test_insert_keeps_unicode(self, store):
        store.insert_user({"name": "Zoë"})
        assert "Zoë" in store.users.path.read_text(encoding="utf-8")

    def test_update_merges_fields(self, store):
        user = store.insert_user({"email": "a@x.com", "name": "Ann", "phone": "1"})

        updated = store.update_user(user["id"], {"name": "Anna", "bio": "hi"})

        assert updated == {"email": "a@x.com", "name": "Anna", "phone": "1", "bio": "hi", "id": user["id"]}
        assert store.list_users() == [updated]

    def test_update_can_overwrite_id(self, store):
        """An id in the body is merged like any other field."""
        user = store.insert_user({"email": "a@x.com"})

        updated = store.update_user(user["id"], {"id": 99})

        assert updated["id"] == 99
        assert store.list_users()[0]["id"] == 99

    def test_update_missing_user_leaves_file_untouched(self, store):
        store.insert_user({"email": "a@x.com"})
        before = store.users.path.read_bytes()

        with pytest.raises(RecordNotFoundError, match="User not found"):
            store.update_user(999999, {"name": "X"})

        assert store.users.path.read_bytes() == before

    def test_update_with_unparsed_id_matches_nothing(self, store):
        store.insert_user({"email": "a@x.com"})
        with pytest.raises(RecordNotFoundError):
            store.update_user(None, {})

    def test_concurrent_inserts_are_all_kept(self, store):
        """Inserts from many threads, as FastAPI's threadpool issues them, never lose a write."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(lambda n: store.insert_user({"email": f"u{n}@x.com"}), range(50)))

        users = store.list_users()
        assert len(users) == 50
        assert len({user["id"] for user in users}) == 50
        assert sorted(u["email"] for u in users) == sorted(u["email"] for u in created)


class TestArtworks:
    """Artwork insert and delete."""

    def test_insert_prepends(self, store):
        art = store.insert_artwork({"title": "New", "artist": "Me", "price": 10, "category": "Digital", "img": "x"})

        listed = store.list_artworks()
        assert listed[0] == art
        assert [a["title"] for a in listed[1:]] == ["Cyber Punk City", "Abstract Blue"]

    def test_delete_removes_matching(self, store):
        store.delete_artwork(1)
        assert [a["id"] for a in store.list_artworks()] == [2]

    def test_delete_removes_every_duplicate(self, store):
        store.artworks.write([{"id": 7}, {"id": 8}, {"id": 7}])
        store.delete_artwork(7)
        assert store.list_artworks() == [{"id": 8}]

    def test_delete_is_idempotent(self, store):
        store.delete_artwork(1)
        after_first = store.artworks.path.read_bytes()

        store.delete_artwork(1)

        assert store.artworks.path.read_bytes() == after_first

    def test_delete_does_not_match_string_ids(self, store):
        store.artworks.write([{"id": "1"}])
        store.delete_artwork(1)
        assert store.list_artworks() == [{"id": "1"}]
