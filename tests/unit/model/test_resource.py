"""Tests for the Resource property bag, links and validation."""

import pytest

from platformsh_client.errors import (
    ImmutableResourceError,
    LinkNotFoundError,
    PropertyNotFoundError,
    ResourceError,
)
from platformsh_client.model import Resource
from platformsh_client.testing import hal

SELF_PATH = "/api/projects/abc123/environments/main"


class Widget(Resource):
    required = ["name", "title"]


@pytest.fixture
def resource(transport):
    data = hal(
        {"id": "main", "title": "Main", "status": "active"},
        {"self": SELF_PATH, "#edit": SELF_PATH},
        activities=[],
    )
    return Resource.wrap(data, transport)


class TestProperties:
    """Read-only access to the property map."""

    @pytest.mark.unit
    def test_properties_exclude_metadata(self, resource):
        """Reserved keys are left out of the property views."""
        assert resource.get_properties() == {"id": "main", "title": "Main", "status": "active"}
        assert resource.get_property_names() == ["id", "title", "status"]

    @pytest.mark.unit
    def test_wrap_keeps_exactly_the_non_reserved_keys(self, transport):
        """Wrapping keeps every non-reserved key as a property."""
        data = {"a": 1, "b": [1, 2], "c": {"d": None}, "_links": {}, "_embedded": {}, "_full": True}

        resource = Resource.wrap(data, transport)

        assert resource.get_properties() == {"a": 1, "b": [1, 2], "c": {"d": None}}

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["_links", "_embedded", "_full"])
    def test_reserved_keys_are_never_properties(self, transport, name):
        """Reserved keys are not readable even when present."""
        resource = Resource.wrap({"_links": {}, "_embedded": {}, "_full": True}, transport)

        assert not resource.has_property(name)
        assert name not in resource
        with pytest.raises(PropertyNotFoundError):
            resource.get_property(name)
        with pytest.raises(PropertyNotFoundError):
            resource[name]

    @pytest.mark.unit
    def test_missing_property_raises(self, resource):
        """Missing properties raise a KeyError-compatible error."""
        with pytest.raises(PropertyNotFoundError) as exc_info:
            resource.get_property("nope")

        assert str(exc_info.value) == "Property not found: nope"
        assert exc_info.value.name == "nope"
        # Usable wherever a KeyError is expected
        assert isinstance(exc_info.value, KeyError)
        assert isinstance(exc_info.value, ResourceError)

    @pytest.mark.unit
    def test_item_access(self, resource):
        """Resources behave like a read-only mapping."""
        assert resource["title"] == "Main"
        assert "title" in resource
        assert "nope" not in resource
        assert list(resource) == ["id", "title", "status"]

    @pytest.mark.unit
    def test_properties_are_read_only(self, resource):
        """Assignment and deletion are refused."""
        with pytest.raises(ImmutableResourceError):
            resource["title"] = "Changed"
        with pytest.raises(ImmutableResourceError):
            del resource["title"]

        assert resource["title"] == "Main"

    @pytest.mark.unit
    def test_returned_views_do_not_alias_internal_data(self, resource):
        """Mutating returned dicts does not change the resource."""
        resource.get_properties()["title"] = "Changed"
        resource.get_data()["title"] = "Changed"

        assert resource["title"] == "Main"

    @pytest.mark.unit
    def test_get_data_includes_metadata(self, resource):
        """get_data() returns the raw payload with metadata."""
        data = resource.get_data()

        assert data["_links"]["self"]["href"] == SELF_PATH
        assert data["_embedded"] == {"activities": []}

    @pytest.mark.unit
    def test_wrapped_resource_is_a_stub(self, resource):
        """Wrapped data is not assumed to be complete."""
        assert resource.is_full is False

    @pytest.mark.unit
    def test_full_flag_read_from_data(self, transport):
        """The _full flag marks a full representation."""
        assert Resource.wrap({"_full": True}, transport).is_full is True


class TestLinks:
    """Link lookup and URI resolution."""

    @pytest.mark.unit
    def test_has_link(self, resource):
        """Links are looked up by relation name."""
        assert resource.has_link("self")
        assert resource.has_link("#edit")
        assert not resource.has_link("#delete")

    @pytest.mark.unit
    def test_get_link_relative(self, resource):
        """Hrefs are returned as stored by default."""
        assert resource.get_link("self") == SELF_PATH
        assert resource.uri() == SELF_PATH

    @pytest.mark.unit
    def test_get_link_absolute_uses_transport_host(self, resource):
        """Host-relative hrefs are qualified with the transport's host."""
        expected = f"https://eu.example.com{SELF_PATH}"

        assert resource.get_link("self", absolute=True) == expected
        assert resource.uri(absolute=True) == expected

    @pytest.mark.unit
    def test_absolute_href_left_alone(self, transport):
        """Absolute hrefs are returned unchanged."""
        href = "https://us.example.com/api/projects/xyz"
        resource = Resource.wrap(hal({}, {"self": href}), transport)

        assert resource.uri(absolute=True) == href

    @pytest.mark.unit
    def test_base_relative_href_resolves_like_requests(self, api, transport):
        """An href without a leading slash is relative to the transport's base URL."""
        expected = "https://eu.example.com/api/projects/abc123/environments/main"
        api.add("GET", expected, hal({"id": "main"}, {"self": "environments/main"}))
        resource = Resource.wrap(hal({"id": "main"}, {"self": "environments/main"}), transport)

        resource.refresh()

        assert resource.uri(absolute=True) == expected
        assert str(api.requests[0].url) == expected

    @pytest.mark.unit
    def test_identity_ignores_href_form(self, transport):
        """Relative and absolute forms of the same self link are the same resource."""
        relative = Resource.wrap(hal({}, {"self": "environments/main"}), transport)
        absolute = Resource.wrap(hal({}, {"self": SELF_PATH}), transport)

        assert relative == absolute
        assert hash(relative) == hash(absolute)

    @pytest.mark.unit
    def test_missing_link_raises(self, resource):
        """Missing links raise a KeyError-compatible error."""
        with pytest.raises(LinkNotFoundError) as exc_info:
            resource.get_link("#delete")

        assert str(exc_info.value) == "Link not found: #delete"
        assert exc_info.value.rel == "#delete"

    @pytest.mark.unit
    def test_empty_links_serialized_as_list(self, transport):
        """An empty link list means no links."""
        resource = Resource.wrap({"_links": []}, transport)

        assert not resource.has_link("self")
        with pytest.raises(LinkNotFoundError):
            resource.uri()

    @pytest.mark.unit
    def test_link_without_href_is_missing(self, transport):
        """A link without href does not count."""
        resource = Resource.wrap({"_links": {"self": {}}}, transport)

        assert not resource.has_link("self")

    @pytest.mark.unit
    def test_operation_available_follows_links(self, resource):
        """Operations are discovered from '#' links."""
        assert resource.operation_available("edit")
        assert not resource.operation_available("delete")


class TestIdentity:
    """Resources are identified by their self link."""

    @pytest.mark.unit
    def test_same_self_link_is_equal(self, transport):
        """Stub and full copies of a resource are equal."""
        stub = Resource.wrap(hal({"title": "Old"}, {"self": SELF_PATH}), transport)
        full = Resource.wrap(hal({"title": "New", "_full": True}, {"self": SELF_PATH}), transport)

        assert stub == full
        assert hash(stub) == hash(full)

    @pytest.mark.unit
    def test_different_self_links_differ(self, transport):
        """Different self links mean different resources."""
        a = Resource.wrap(hal({}, {"self": "/a"}), transport)
        b = Resource.wrap(hal({}, {"self": "/b"}), transport)

        assert a != b

    @pytest.mark.unit
    def test_without_self_link_only_identical_objects_are_equal(self, transport):
        """Without a self link, equality falls back to identity."""
        a = Resource.wrap({"id": 1}, transport)
        b = Resource.wrap({"id": 1}, transport)

        assert a == a
        assert a != b


class TestValidation:
    """Required property checks."""

    @pytest.mark.unit
    def test_check_reports_missing(self):
        """Missing required properties are reported."""
        assert Widget.check({"name": "x"}) == ["Missing: title"]

    @pytest.mark.unit
    def test_check_passes(self):
        """Complete data has no errors."""
        assert Widget.check({"name": "x", "title": "y"}) == []

    @pytest.mark.unit
    def test_check_lists_all_missing_in_order(self):
        """All missing names are listed in declaration order."""
        assert Widget.check({}) == ["Missing: name, title"]

    @pytest.mark.unit
    def test_base_resource_requires_nothing(self):
        """The base class has no required properties."""
        assert Resource.get_required() == []
        assert Resource.check({}) == []

    @pytest.mark.unit
    def test_get_required_returns_copy(self):
        """Callers cannot alter the required list."""
        Widget.get_required().append("other")

        assert Widget.get_required() == ["name", "title"]


class TestWrapCollection:
    """Wrapping arrays of JSON objects."""

    @pytest.mark.unit
    def test_preserves_order_and_type(self, transport):
        """Collection items keep their order and class."""
        items = [{"id": "c"}, {"id": "a"}, {"id": "b"}]

        widgets = Widget.wrap_collection(items, transport)

        assert [w["id"] for w in widgets] == ["c", "a", "b"]
        assert all(isinstance(w, Widget) for w in widgets)
        assert not any(w.is_full for w in widgets)
        assert all(w.transport is transport for w in widgets)

    @pytest.mark.unit
    def test_wrap_makes_no_requests(self, api, transport):
        """Wrapping never touches the network."""
        Resource.wrap_collection([{"id": 1}, {"id": 2}], transport)

        assert api.requests == []
