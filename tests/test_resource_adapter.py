from api_doc_builder.adapter.resource import make_operations, resource_tag
from api_doc_builder.model.base import ContentType, HttpMethod, Property, SchemaDefinition
from api_doc_builder.model.types import StringType


class Widget:
    @classmethod
    def schema_name(cls):
        return "Widget"

    @classmethod
    def content_type(cls):
        return ContentType.JSON

    @classmethod
    def properties(cls):
        return [Property(name="id", type=StringType())]


CREATE_WIDGET = SchemaDefinition(name="CreateWidget", properties=[Property(name="name", type=StringType())])
PATCH_WIDGET = SchemaDefinition(
    name="PatchWidget", properties=[Property(name="name", type=StringType(), required=False)]
)


def _handler(*args, **kwargs):
    return None


class FullResource:
    index = store = show = update = replace = destroy = staticmethod(_handler)


class ReadOnlyResource:
    index = staticmethod(_handler)
    show = staticmethod(_handler)
    store = None


class TestMakeOperations:
    def test_all_handlers(self):
        ops = make_operations(FullResource(), "/widgets", Widget)
        assert [(op.method, op.path) for op in ops] == [
            (HttpMethod.GET, "/widgets"),
            (HttpMethod.POST, "/widgets"),
            (HttpMethod.GET, "/widgets/{id}"),
            (HttpMethod.PATCH, "/widgets/{id}"),
            (HttpMethod.PUT, "/widgets/{id}"),
            (HttpMethod.DELETE, "/widgets/{id}"),
        ]
        assert [op.summary for op in ops] == [
            "Fetch all Widgets",
            "Create a Widget",
            "Fetch a Widget by id",
            "Update a Widget",
            "Replace a Widget",
            "Delete a Widget",
        ]

    def test_missing_and_none_handlers_skipped(self):
        ops = make_operations(ReadOnlyResource(), "/widgets", Widget)
        assert [op.summary for op in ops] == ["Fetch all Widgets", "Fetch a Widget by id"]

    def test_responses(self):
        index, store, show, update, replace, destroy = make_operations(FullResource(), "/widgets", Widget)
        assert index.responses[0].description == "Array of Widgets"
        assert index.responses[0].model.name == "Widget"
        assert [r.status_code for r in store.responses] == [201]
        assert [r.status_code for r in show.responses] == [200, 404]
        assert [r.status_code for r in destroy.responses] == [200, 404]
        assert destroy.responses[0].model is None
        assert destroy.request_model is None

    def test_request_models_default_to_model(self):
        _, store, _, update, replace, _ = make_operations(FullResource(), "/widgets", Widget)
        assert store.request_model.name == "Widget"
        assert update.request_model.name == "Widget"
        assert replace.request_model.name == "Widget"

    def test_store_and_update_models(self):
        _, store, _, update, replace, _ = make_operations(
            FullResource(), "/widgets/", Widget, store_model=CREATE_WIDGET, update_model=PATCH_WIDGET
        )
        assert store.request_model == CREATE_WIDGET
        assert replace.request_model == CREATE_WIDGET
        assert update.request_model == PATCH_WIDGET
        assert update.path == "/widgets/{id}"


class TestResourceTag:
    def test_wraps_operations(self):
        tag = resource_tag("Widgets", ReadOnlyResource(), "/widgets", Widget, description="Widget resource")
        assert tag.name == "Widgets"
        assert tag.description == "Widget resource"
        assert len(tag.operations) == 2
