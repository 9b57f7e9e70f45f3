from shopfront.client.storage import LocalStorage


def test_set_get_remove(tmp_path):
    s = LocalStorage(tmp_path / "sub" / "store.json")
    assert s.get_item("k") is None
    s.set_item("k", "v")
    s.set_item("other", "w")
    assert LocalStorage(tmp_path / "sub" / "store.json").get_item("k") == "v"
    s.remove_item("k")
    assert s.get_item("k") is None
    assert s.get_item("other") == "w"
    s.clear()
    assert s.get_item("other") is None


def test_unreadable_file_is_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("garbage", encoding="utf-8")
    s = LocalStorage(path)
    assert s.get_item("k") is None
    s.set_item("k", "v")
    assert s.get_item("k") == "v"
