"""Unit tests for OwnershipPolicy."""

import pytest

from forum.domain.error import AuthorizationError
from forum.domain.service import OwnershipPolicy


class TestVerifyOwner:
    """Tests for verify_owner."""

    def test_owner_passes(self):
        OwnershipPolicy().verify_owner("user-123", "user-123", "comment", "comment-1")

    def test_non_owner_fails(self):
        with pytest.raises(AuthorizationError) as exc_info:
            OwnershipPolicy().verify_owner(
                "user-123", "user-456", "comment", "comment-1"
            )

        assert exc_info.value.user_id == "user-456"
        assert exc_info.value.resource == "comment"
        assert exc_info.value.resource_id == "comment-1"

    def test_comparison_is_exact(self):
        """IDs differing only in case are different users."""
        with pytest.raises(AuthorizationError):
            OwnershipPolicy().verify_owner("user-ABC", "user-abc")
