"""Tests for session start-up and the end-to-end flow."""

import asyncio
import string

from pwordgen.utils.location import MemoryLocation
from pwordgen.utils.options import PasswordOptions, default_options
from pwordgen.utils.password_generator import generate_password, project
from pwordgen.utils.pipeline import GenerationStatus
from pwordgen.utils.session import PasswordSession
from pwordgen.utils.url_codec import decode, encode, query_from_url

SHARED = ("https://pwordgen.com/?length=20&upper=true&lower=false&digits=true"
          "&symbols=false&excludeSimilar=true&requireEach=false")


def test_initialize_without_parameters_generates_once(location, clipboard, generator):
    session = PasswordSession(location, clipboard, generator=generator)

    state = session.initialize()

    assert session.options == default_options()
    assert len(generator.calls) == 1
    assert state.password == "x" * 16
    assert state.status is GenerationStatus.SUCCESS
    assert decode(query_from_url(location.url)) == default_options()


def test_initialize_loads_shared_link(clipboard, generator):
    location = MemoryLocation(SHARED)
    session = PasswordSession(location, clipboard, generator=generator)

    session.initialize()

    opts = session.options
    assert opts.length == 20
    assert opts.include_lower is False
    assert opts.include_symbols is False
    assert opts.exclude_similar is True
    assert opts.require_each_selected_class is False
    assert len(generator.calls) == 1


def test_initialize_runs_only_once(location, clipboard, generator):
    session = PasswordSession(location, clipboard, generator=generator)
    session.initialize()
    session.initialize()
    assert len(generator.calls) == 1


def test_bad_link_falls_back_to_defaults(clipboard, generator):
    location = MemoryLocation("https://pwordgen.com/?length=abc&upper=maybe")
    session = PasswordSession(location, clipboard, generator=generator)
    session.initialize()
    assert session.options.length == 16
    assert session.options.include_upper is False


def test_updates_flow_through_pipeline(location, clipboard, generator):
    session = PasswordSession(location, clipboard, generator=generator)
    session.initialize()

    state = session.update(length=24)

    assert state.password == "x" * 24
    assert "length=24" in location.url
    assert len(location.replaced) == 2


def test_copy_through_session(location, clipboard):
    session = PasswordSession(location, clipboard, copy_delay=0.05)
    session.initialize()

    async def scenario():
        await session.copy()
        assert session.state.copy_success is True
        session.close()

    asyncio.run(scenario())
    assert clipboard.copied == [session.state.password]


def test_end_to_end_scenario(clipboard):
    opts = PasswordOptions(length=20, include_upper=True, include_lower=False,
                           include_digits=True, include_symbols=False,
                           exclude_similar=True, require_each_selected_class=False)

    assert decode(encode(opts)) == opts

    pw = generate_password(project(opts))
    assert len(pw) == 20
    assert not any(c in string.ascii_lowercase for c in pw)

    session = PasswordSession(MemoryLocation(SHARED), clipboard)
    state = session.initialize()
    assert session.options == opts
    assert len(state.password) == 20
    assert not any(c in string.ascii_lowercase for c in state.password)


def test_unparseable_address_still_initializes(clipboard, generator):
    location = MemoryLocation("https://[pwordgen.com/?length=20&digits=false")
    session = PasswordSession(location, clipboard, generator=generator)

    state = session.initialize()

    assert session.options.length == 20
    assert session.options.include_digits is False
    assert state.password == "x" * 20
    assert location.url.startswith("https://[pwordgen.com/?length=20&")
