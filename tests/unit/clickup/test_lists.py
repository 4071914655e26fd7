"""Tests for the ClickUp lists and folders mixins."""

import pytest


class TestListsMixin:
    """Tests for the ListsMixin class."""

    @pytest.fixture
    def lists_mixin(self, clickup_fetcher):
        return clickup_fetcher

    def test_get_lists_in_folder(self, lists_mixin):
        lists_mixin.get.return_value = {"lists": [{"id": "l1"}]}

        result = lists_mixin.get_lists("folder", "f1", archived=False)

        assert result == {"lists": [{"id": "l1"}]}
        lists_mixin.get.assert_called_once_with(
            "/folder/f1/list", params={"archived": False}
        )

    def test_get_lists_invalid_container(self, lists_mixin):
        with pytest.raises(ValueError, match="Invalid container_type 'workspace'"):
            lists_mixin.get_lists("workspace", "w1")
        lists_mixin.get.assert_not_called()

    def test_get_folderless_lists(self, lists_mixin):
        lists_mixin.get_folderless_lists("s1")
        lists_mixin.get.assert_called_once_with(
            "/space/s1/list", params={"archived": None}
        )

    def test_create_list_skips_unset_fields(self, lists_mixin):
        lists_mixin.post.return_value = {"id": "l2"}

        result = lists_mixin.create_list(
            "folder", "f1", "Sprint 1", content="Goals", due_date=None
        )

        assert result == {"id": "l2"}
        lists_mixin.post.assert_called_once_with(
            "/folder/f1/list", json={"content": "Goals", "name": "Sprint 1"}
        )

    def test_create_folderless_list(self, lists_mixin):
        lists_mixin.create_folderless_list("s1", "Backlog")
        lists_mixin.post.assert_called_once_with(
            "/space/s1/list", json={"name": "Backlog"}
        )

    def test_get_update_delete_list(self, lists_mixin):
        lists_mixin.get_list("l1")
        lists_mixin.get.assert_called_once_with("/list/l1")

        lists_mixin.update_list("l1", "Renamed", content="New content")
        lists_mixin.put.assert_called_once_with(
            "/list/l1", json={"content": "New content", "name": "Renamed"}
        )

        lists_mixin.delete_list("l1")
        lists_mixin.delete.assert_called_once_with("/list/l1")

    def test_add_and_remove_task(self, lists_mixin):
        lists_mixin.add_task_to_list("l1", "t1")
        lists_mixin.post.assert_called_once_with("/list/l1/task/t1")

        lists_mixin.remove_task_from_list("l1", "t1")
        lists_mixin.delete.assert_called_once_with("/list/l1/task/t1")

    @pytest.mark.parametrize("container_type", ["folder", "space"])
    def test_create_list_from_template(self, lists_mixin, container_type):
        lists_mixin.create_list_from_template(container_type, "c1", "tmpl-1", "From template")
        lists_mixin.post.assert_called_once_with(
            f"/{container_type}/c1/list_template/tmpl-1",
            json={"name": "From template"},
        )


class TestFoldersMixin:
    """Tests for the FoldersMixin class."""

    @pytest.fixture
    def folders_mixin(self, clickup_fetcher):
        return clickup_fetcher

    def test_create_folder(self, folders_mixin):
        folders_mixin.post.return_value = {"id": "f1", "name": "Roadmap"}

        result = folders_mixin.create_folder("s1", "Roadmap")

        assert result["id"] == "f1"
        folders_mixin.post.assert_called_once_with(
            "/space/s1/folder", json={"name": "Roadmap"}
        )

    def test_update_folder(self, folders_mixin):
        folders_mixin.update_folder("f1", "Renamed")
        folders_mixin.put.assert_called_once_with("/folder/f1", json={"name": "Renamed"})

    def test_delete_folder(self, folders_mixin):
        assert folders_mixin.delete_folder("f1") == {}
        folders_mixin.delete.assert_called_once_with("/folder/f1")
