"""Tests for attaching documentation comments to JavaScript symbols."""

from pathlib import Path

from catalog_schema.doc_record import DocumentationRecord
from catalog_schema.extract_doc_records import extract_doc_records

FIXTURES = Path(__file__).parent / "fixtures" / "lib" / "Models"

SOURCE = """
/**
 * A thing.
 * @alias Thing
 * @constructor
 */
var Thing = function() {
    /**
     * Gets or sets the size.
     * @type {Number}
     * @editortitle Size in metres
     */
    this.size = 1;

    /**
     * Gets or sets a callback.
     * @type {Function}
     */
    this.callback = undefined;

    knockout.getObservable(this, 'size').subscribe(function() {
        /**
         * Not a member of Thing.
         * @type {String}
         */
        this.inner = '';
    });
};

/**
 * A helper.
 */
function helper() {}

/***********************
 * Banner, ignored.
 ***********************/

defineProperties(Thing.prototype, {
    /**
     * Gets the weight.
     * @memberOf Thing.prototype
     * @type {Number}
     */
    weight : {
        get : function() { return 2; }
    },

    /**
     * Gets the colour.
     * @type {String}
     */
    colour : {
        get : function() { return 'red'; }
    }
});
"""


def _by_name(records: list[DocumentationRecord]) -> dict[str, DocumentationRecord]:
    return {r.name: r for r in records}


def test_class_record() -> None:
    """Verify that a constructor comment yields the class record."""
    records = _by_name(extract_doc_records(SOURCE))
    thing = records["Thing"]
    assert thing.kind == "class"
    assert thing.memberof is None
    assert thing.description == "A thing."
    assert thing.line == 7


def test_constructor_members() -> None:
    """Verify that ``this.x`` assignments are members of the class."""
    records = _by_name(extract_doc_records(SOURCE))
    size = records["size"]
    assert size.kind == "member"
    assert size.memberof == "Thing"
    assert size.declared_types == ("Number",)
    assert size.tag("editortitle") == "Size in metres"
    assert size.line == 13
    assert records["callback"].kind == "member"


def test_anonymous_function_resets_owner() -> None:
    """Verify that assignments in nested callbacks do not join the class."""
    records = _by_name(extract_doc_records(SOURCE))
    assert records["inner"].memberof is None


def test_functions_and_banners() -> None:
    """Verify function records and that banner comments are skipped."""
    records = extract_doc_records(SOURCE)
    names = [r.name for r in records]
    assert _by_name(records)["helper"].kind == "function"
    assert all("Banner" not in (r.description or "") for r in records)
    assert names.index("Thing") < names.index("size") < names.index("helper")


def test_define_properties_members() -> None:
    """Verify that property definitions belong to the prototype owner."""
    records = _by_name(extract_doc_records(SOURCE))
    assert records["weight"].memberof == "Thing"
    assert records["colour"].memberof == "Thing"
    assert records["colour"].kind == "member"


def test_fixture_records() -> None:
    """Verify records extracted from a realistic catalog class."""
    text = (FIXTURES / "WebMapServiceCatalogItem.js").read_text(encoding="utf-8")
    records = _by_name(extract_doc_records(text))
    assert records["WebMapServiceCatalogItem"].kind == "class"
    assert records["WebMapServiceCatalogItem"].tag("editortitle") == "WMS layer"
    assert records["getFeatureInfoFormats"].declared_types == ("Array.<GetFeatureInfoFormat>",)
    assert records["onTileLoaded"].kind == "function"
    assert records["typeName"].memberof == "WebMapServiceCatalogItem"
    assert records["layers"].line == 27
