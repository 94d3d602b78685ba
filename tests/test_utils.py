from ldapdefs import utils


def test_find_closing_paren():
    test_good = (
        ('(abc)def', 4),
        ('(abcd)', 5),
        ('()', 1),
        ('(())..', 3),
        ('(a(bc)(d(efg))hi)jk', 16),
        ("( 1.2.3 DESC 'a ) in quotes' )x", 29),
    )

    for test, expected in test_good:
        actual = utils.find_closing_paren(test)
        assert actual == expected

    test_bad = (
        'a(bc)d',
        '(abcd',
        "( 'unterminated ) )",
    )

    for test in test_bad:
        try:
            utils.find_closing_paren(test)
            assert False
        except ValueError:
            pass


def test_collapse_whitespace():
    assert utils.collapse_whitespace('  a\n\t b   c ') == 'a b c'


def test_case_ignore_dict():
    d = utils.CaseIgnoreDict({'X-ORIGIN': ['RFC 4512']})
    assert 'x-origin' in d
    assert d['X-Origin'] == ['RFC 4512']
    assert d.get('x-missing') is None

    d['x-origin'] = ['other']
    assert len(d) == 1
    assert list(d.keys()) == ['x-origin']

    assert d.setdefault('X-NEW', []) == []
    assert 'x-new' in d

    del d['X-ORIGIN']
    assert 'x-origin' not in d

    d.clear()
    assert len(d) == 0
    assert 'x-new' not in d
