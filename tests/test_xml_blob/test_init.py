"""Test module for xml_blob package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import xml_blob

    # Assert
    assert xml_blob is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import xml_blob

    # Assert
    assert isinstance(xml_blob.__version__, str)
    assert xml_blob.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import xml_blob

    # Assert
    assert xml_blob.__author__ == "XML Blob Team"


def test_package_all_exports() -> None:
    """Test that __all__ contains expected exports."""
    # Arrange & Act
    import xml_blob

    # Assert
    expected = {
        "node", "attrs", "attr", "text", "cdata", "mask",
        "empty_node", "empty_attr", "empty_attrs", "empty_text", "empty_cdata",
        "Blob", "Node", "Attrs", "Attr", "Text", "Cdata",
        "Printer", "StringPrinter", "StreamPrinter",
        "PrinterConfig", "BlobConfig", "AttributeOrder", "DEFAULT_MASK",
        "InvalidArgumentError",
    }
    assert expected <= set(xml_blob.__all__)
    for name in xml_blob.__all__:
        assert hasattr(xml_blob, name), f"missing export {name}"


def test_top_level_usage() -> None:
    """Test building and printing through the top-level namespace only."""
    # Arrange
    import xml_blob

    # Act
    tree = xml_blob.node(
        "card",
        xml_blob.attrs("type", "visa"),
        xml_blob.node("number", xml_blob.mask("4111111111111111", "****")),
    )

    # Assert
    assert tree.to_xml() == '<card type="visa"><number>4111111111111111</number></card>'
    assert tree.to_xml(mask=True) == '<card type="visa"><number>****</number></card>'


def test_no_parsing_layer() -> None:
    """Test the package ships builders and printers only, no XML parsing."""
    # Arrange
    import importlib.util

    import xml_blob

    # Act
    api_spec = importlib.util.find_spec("xml_blob.api")

    # Assert
    assert api_spec is None
    assert not hasattr(xml_blob, "api")
