"""
Unit tests for post use cases, run against the in-memory PostRepository.
"""
import logging
from unittest.mock import AsyncMock, patch

import pytest
from app.application.services.post_authorization import PostOwnershipPolicy, warn_on_unchecked_deletes
from app.application.use_cases.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from app.domain.exceptions import Forbidden, InternalError, NoModification, NotFound
from app.domain.models import Post, WriteResult


class TestCreateAndListPosts:
    """Tests for CreatePostUseCase and ListPostsUseCase"""

    @pytest.mark.asyncio
    async def test_body_is_stored_verbatim(self, post_repo):
        body = {"content": "hello", "likes": 99, "likedBy": ["spoof"], "author": "alice"}
        post_id = await CreatePostUseCase(post_repo).execute(body)

        posts = await ListPostsUseCase(post_repo).execute()
        assert posts == [{"_id": post_id, **body}]

    @pytest.mark.asyncio
    async def test_listing_keeps_insertion_order(self, post_repo):
        create = CreatePostUseCase(post_repo)
        ids = [await create.execute({"content": str(i)}) for i in range(3)]

        posts = await ListPostsUseCase(post_repo).execute()
        assert [p["_id"] for p in posts] == ids

    @pytest.mark.asyncio
    async def test_non_object_body_raises(self, post_repo):
        with pytest.raises(InternalError):
            await CreatePostUseCase(post_repo).execute(["not", "an", "object"])

    @pytest.mark.asyncio
    async def test_store_failure_raises(self):
        repo = AsyncMock()
        repo.insert.side_effect = RuntimeError("Error inserting post: boom")
        with pytest.raises(InternalError):
            await CreatePostUseCase(repo).execute({"content": "x"})

    @pytest.mark.asyncio
    async def test_no_generated_id_returns_none(self):
        repo = AsyncMock()
        repo.insert.return_value = None
        assert await CreatePostUseCase(repo).execute({"content": "x"}) is None


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase"""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, post_repo):
        post_id = await post_repo.insert({"content": "c", "likes": 0, "likedBy": []})
        use_case = ToggleLikeUseCase(post_repo)

        await use_case.execute(post_id, "U")
        assert post_repo.documents[post_id]["likes"] == 1
        assert post_repo.documents[post_id]["likedBy"] == ["U"]
        assert post_repo.documents[post_id]["liked"] is True

        await use_case.execute(post_id, "U")
        assert post_repo.documents[post_id]["likes"] == 0
        assert post_repo.documents[post_id]["likedBy"] == []
        assert post_repo.documents[post_id]["liked"] is False

    @pytest.mark.asyncio
    async def test_counter_matches_set_after_every_call(self, post_repo):
        post_id = await post_repo.insert({"content": "c", "likes": 0, "likedBy": []})
        use_case = ToggleLikeUseCase(post_repo)

        for user_id in ["A", "B", "A", "C", "B", "B"]:
            await use_case.execute(post_id, user_id)
            document = post_repo.documents[post_id]
            assert document["likes"] == len(document["likedBy"])
            assert len(set(document["likedBy"])) == len(document["likedBy"])

        assert sorted(post_repo.documents[post_id]["likedBy"]) == ["B", "C"]

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, post_repo):
        with pytest.raises(NotFound):
            await ToggleLikeUseCase(post_repo).execute("ffffffffffffffffffffffff", "U")

    @pytest.mark.asyncio
    async def test_matched_but_unmodified_raises(self):
        repo = AsyncMock()
        repo.toggle_like.return_value = WriteResult(matched=1, modified=0)
        with pytest.raises(NoModification):
            await ToggleLikeUseCase(repo).execute("p1", "U")

    @pytest.mark.asyncio
    async def test_toggle_is_a_single_store_call(self):
        """No separate read: membership is decided by the store in the same write."""
        repo = AsyncMock()
        repo.toggle_like.return_value = WriteResult(matched=1, modified=1)
        await ToggleLikeUseCase(repo).execute("p1", "U")
        repo.toggle_like.assert_awaited_once_with("p1", "U")
        repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_failure_is_internal(self):
        repo = AsyncMock()
        repo.toggle_like.side_effect = RuntimeError("down")
        with pytest.raises(InternalError):
            await ToggleLikeUseCase(repo).execute("p1", "U")


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase"""

    @pytest.mark.asyncio
    async def test_comments_are_append_only(self, post_repo):
        post_id = await post_repo.insert({"content": "c"})
        use_case = AddCommentUseCase(post_repo)

        first = await use_case.execute(post_id, {"text": "one", "user": "alice"})
        before = list(post_repo.documents[post_id]["comments"])
        second = await use_case.execute(post_id, {"text": "two"})

        comments = post_repo.documents[post_id]["comments"]
        assert comments[: len(before)] == before
        assert [c["_id"] for c in comments] == [first.id, second.id]
        assert first.id != second.id
        assert comments[0] == {"text": "one", "user": "alice", "_id": first.id}

    @pytest.mark.asyncio
    async def test_missing_comment_info_still_gets_id(self, post_repo):
        post_id = await post_repo.insert({"content": "c"})
        comment = await AddCommentUseCase(post_repo).execute(post_id, None)
        assert post_repo.documents[post_id]["comments"] == [{"_id": comment.id}]

    @pytest.mark.asyncio
    async def test_unknown_post_raises(self, post_repo):
        with pytest.raises(NoModification):
            await AddCommentUseCase(post_repo).execute("ffffffffffffffffffffffff", {"text": "x"})


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase"""

    @pytest.mark.asyncio
    async def test_replaces_content(self, post_repo):
        post_id = await post_repo.insert({"content": "old"})
        await UpdatePostUseCase(post_repo).execute(post_id, {"text": "new"}, "anyone")
        assert post_repo.documents[post_id]["content"] == {"text": "new"}

    @pytest.mark.asyncio
    async def test_same_content_is_no_modification(self, post_repo):
        post_id = await post_repo.insert({"content": "same"})
        with pytest.raises(NoModification):
            await UpdatePostUseCase(post_repo).execute(post_id, "same", "anyone")

    @pytest.mark.asyncio
    async def test_any_user_may_edit_by_default(self, post_repo):
        post_id = await post_repo.insert({"content": "old", "authorId": "owner"})
        await UpdatePostUseCase(post_repo).execute(post_id, "new", "someone-else")
        assert post_repo.documents[post_id]["content"] == "new"

    @pytest.mark.asyncio
    async def test_ownership_enforced_when_configured(self, post_repo):
        post_id = await post_repo.insert({"content": "old", "authorId": "owner"})
        policy = PostOwnershipPolicy(post_repo, owner_field="authorId")
        use_case = UpdatePostUseCase(post_repo, ownership_policy=policy)

        with pytest.raises(Forbidden, match="Not allowed"):
            await use_case.execute(post_id, "new", "someone-else")
        assert post_repo.documents[post_id]["content"] == "old"

        await use_case.execute(post_id, "new", "owner")
        assert post_repo.documents[post_id]["content"] == "new"


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase"""

    @pytest.mark.asyncio
    async def test_delete_existing(self, post_repo):
        post_id = await post_repo.insert({"content": "c"})
        await DeletePostUseCase(post_repo).execute(post_id)
        assert post_id not in post_repo.documents

    @pytest.mark.asyncio
    async def test_delete_missing_raises_no_modification(self, post_repo):
        with pytest.raises(NoModification):
            await DeletePostUseCase(post_repo).execute("ffffffffffffffffffffffff")

    @pytest.mark.asyncio
    async def test_anonymous_delete_skips_ownership(self, post_repo):
        post_id = await post_repo.insert({"content": "c", "authorId": "owner"})
        policy = PostOwnershipPolicy(post_repo, owner_field="authorId")
        await DeletePostUseCase(post_repo, ownership_policy=policy).execute(post_id)
        assert post_id not in post_repo.documents

    @pytest.mark.asyncio
    async def test_authenticated_delete_checks_ownership(self, post_repo):
        post_id = await post_repo.insert({"content": "c", "authorId": "owner"})
        policy = PostOwnershipPolicy(post_repo, owner_field="authorId")
        with pytest.raises(Forbidden):
            await DeletePostUseCase(post_repo, ownership_policy=policy).execute(post_id, "intruder")
        assert post_id in post_repo.documents


class TestInMemoryStoreUsesPostRules:
    """The in-memory store applies the Post model's own like and comment rules"""

    @pytest.mark.asyncio
    async def test_toggle_goes_through_post_model(self, post_repo):
        post_id = await post_repo.insert({"content": "c"})
        with patch.object(Post, "toggle_like", autospec=True, side_effect=Post.toggle_like) as toggle:
            await ToggleLikeUseCase(post_repo).execute(post_id, "U")
        toggle.assert_called_once()
        assert toggle.call_args.args[1] == "U"
        assert post_repo.documents[post_id]["likedBy"] == ["U"]

    @pytest.mark.asyncio
    async def test_comment_goes_through_post_model(self, post_repo):
        post_id = await post_repo.insert({"content": "c"})
        with patch.object(Post, "add_comment", autospec=True, side_effect=Post.add_comment) as add:
            comment = await AddCommentUseCase(post_repo).execute(post_id, {"text": "hi"})
        add.assert_called_once()
        assert add.call_args.args[1] is comment


class TestUncheckedDeleteWarning:
    """Tests for warn_on_unchecked_deletes"""

    def test_warns_when_owner_field_set_and_delete_ungated(self, mock_settings, caplog):
        mock_settings.post_owner_field = "authorId"
        mock_settings.delete_requires_auth = False
        with caplog.at_level(logging.WARNING):
            assert warn_on_unchecked_deletes(mock_settings) is True
        assert "DELETE_REQUIRES_AUTH" in caplog.text

    @pytest.mark.parametrize("owner_field,delete_gated", [("", False), ("", True), ("authorId", True)])
    def test_silent_otherwise(self, mock_settings, caplog, owner_field, delete_gated):
        mock_settings.post_owner_field = owner_field
        mock_settings.delete_requires_auth = delete_gated
        with caplog.at_level(logging.WARNING):
            assert warn_on_unchecked_deletes(mock_settings) is False
        assert caplog.text == ""
