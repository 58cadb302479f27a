"""
Tests for errors.py - error kinds.
"""

from jobboard.errors import BadRequestError, JobBoardError, NotFoundError


class TestErrorKinds:
    """Test the error kinds raised by the repositories."""

    def test_bad_request(self):
        err = BadRequestError("No data")

        assert isinstance(err, JobBoardError)
        assert err.status == 400
        assert err.message == "No data"
        assert str(err) == "No data"

    def test_not_found_carries_ident(self):
        err = NotFoundError("No job: 5", ident=5)

        assert err.status == 404
        assert err.ident == 5

    def test_kinds_are_distinct(self):
        assert not isinstance(NotFoundError("x"), BadRequestError)
        assert not isinstance(BadRequestError("x"), NotFoundError)

    def test_status_override(self):
        assert JobBoardError("teapot", status=418).status == 418
        assert JobBoardError("boom").status == 500
