from auto_page_composer.firestore_layout_store import FirestoreLayoutStore
from auto_page_composer.layout_store import InMemoryLayoutStore
from auto_page_composer.models.component import PageType
from auto_page_composer.models.layout import PageLayout, PageMetadata
from auto_page_composer.models.site import GlobalComponent


def _layout(page_id: str, website_id: str = "site-1", slug: str = "/pricing") -> PageLayout:
    return PageLayout(
        page_id=page_id,
        website_id=website_id,
        slug=slug,
        type=PageType.pricing,
        metadata=PageMetadata(title="Pricing", description="Plans"),
    )


def test_save_is_an_upsert_per_slug():
    store = InMemoryLayoutStore()
    store.save_page_layout(_layout("first"))
    store.save_page_layout(_layout("second"))

    assert store.get_page_layout("site-1", "/pricing").page_id == "second"
    assert len(store.list_page_layouts("site-1")) == 1


def test_layouts_are_scoped_by_website():
    store = InMemoryLayoutStore()
    store.save_page_layout(_layout("a", website_id="site-1"))
    store.save_page_layout(_layout("b", website_id="site-2"))
    store.save_page_layout(_layout("c", website_id="site-1", slug="/"))

    assert {layout.page_id for layout in store.list_page_layouts("site-1")} == {"a", "c"}
    assert store.get_page_layout("site-2", "/") is None


def test_global_components_are_an_upsert_per_type():
    store = InMemoryLayoutStore()
    store.save_global_components(
        "site-1",
        [
            GlobalComponent(id="old-header", type="header", component_id="nav-header"),
            GlobalComponent(id="global-footer", type="footer", component_id="footer-standard"),
        ],
    )
    store.save_global_components(
        "site-1", [GlobalComponent(id="global-header", type="header", component_id="nav-header")]
    )
    store.save_global_components(
        "site-2", [GlobalComponent(id="other-header", type="header", component_id="nav-header")]
    )

    assert sorted(component.id for component in store.get_global_components("site-1")) == [
        "global-footer",
        "global-header",
    ]
    assert [component.id for component in store.get_global_components("site-2")] == ["other-header"]
    assert store.get_global_components("site-3") == []


def test_firestore_document_ids():
    assert FirestoreLayoutStore.document_id("site-1", "/") == "site-1__index"
    assert FirestoreLayoutStore.document_id("site-1", "/pricing") == "site-1__pricing"
    assert FirestoreLayoutStore.document_id("site-1", "/blog/post") == "site-1__blog__post"
