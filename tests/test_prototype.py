from lldpatterns.prototype import BadDocument, Document, bad_prototype, good_prototype


def test_clone_is_equal_but_distinct():
    original = Document(title="t", content="c")
    clone = original.clone()
    assert clone == original
    assert clone is not original
    assert type(clone) is Document


def test_changing_clone_leaves_original():
    original = Document(title="t", content="c")
    clone = original.clone()
    clone.title = "other"
    assert original.title == "t"
    assert clone.content == original.content


def test_clone_is_shallow():
    shared = ["x"]
    original = Document(title="t", content=shared)
    clone = original.clone()
    assert clone.content is original.content


def test_bad_document_fields():
    doc = BadDocument(title="a", content="b")
    assert (doc.title, doc.content) == ("a", "b")


def test_good_prototype_output(capsys):
    good_prototype()
    assert capsys.readouterr().out == (
        "Original: Prototype Design Pattern - This is a reusable template.\n"
        "Clone 1: Clone 1 - This is a reusable template.\n"
        "Clone 2: Clone 2 - This is a reusable template.\n"
    )


def test_bad_prototype_output(capsys):
    bad_prototype()
    assert capsys.readouterr().out == (
        "Doc1: Doc 1 - This is the same content\n"
        "Doc2: Doc 2 - This is the same content\n"
    )