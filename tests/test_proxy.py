import pytest

from patternkit.proxy import Proxy, RealSubject, Subject, main


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_subject_is_abstract():
    with pytest.raises(TypeError):
        Subject()


def test_real_subject_default_name(capsys):
    RealSubject().request()
    assert _lines(capsys) == ["RealSubject:unknown", "RealSubject::Request()"]


def test_real_subject_named(capsys):
    RealSubject("alpha").request()
    assert _lines(capsys)[0] == "RealSubject:alpha"


def test_proxy_creates_subject_when_missing():
    proxy = Proxy()
    assert isinstance(proxy.real_subject, RealSubject)
    assert proxy.real_subject.name == "unknown"


def test_proxy_keeps_given_subject():
    subject = RealSubject("beta")
    assert Proxy(subject).real_subject is subject


def test_proxy_request_wraps(capsys):
    Proxy(RealSubject("Proxy Pattern")).request()
    assert _lines(capsys) == [
        "Proxy::PreRequest()",
        "RealSubject:Proxy Pattern",
        "RealSubject::Request()",
        "Proxy::PostRequest()",
    ]


def test_pre_and_post_request(capsys):
    proxy = Proxy()
    proxy.pre_request()
    proxy.post_request()
    assert _lines(capsys) == ["Proxy::PreRequest()", "Proxy::PostRequest()"]


def test_main_default(capsys):
    assert main([]) == 0
    assert _lines(capsys)[1] == "RealSubject:Proxy Pattern"


def test_main_with_name(capsys):
    assert main(["gamma"]) == 0
    lines = _lines(capsys)
    assert lines[1] == "RealSubject:gamma"
    assert len(lines) == 4