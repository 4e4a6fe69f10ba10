import asyncio
import os

import pytest


def test_job_directory(space):
    assert space.job_directory(os.path.isdir) is True

    path = space.job_directory(lambda d: d)
    assert not os.path.exists(path)
    assert path not in space.registry


def test_job_directory_removes_contents(space):
    def work(d):
        os.makedirs(os.path.join(d, "nested"))
        with open(os.path.join(d, "nested", "f.txt"), "w") as fh:
            fh.write("x")
        return d

    assert not os.path.exists(space.job_directory(work))


def test_job_file_named(space):
    assert space.job_file(lambda f: f.endswith("custom-name.md"), name="custom-name.md")

    parent = space.job_file(os.path.dirname, name="custom-name.md")
    assert not os.path.exists(parent)
    assert len(space.registry) == 0


def test_job_file_unnamed(space):
    def work(f):
        with open(f, "w") as fh:
            fh.write("unicorn")
        return f

    path = space.job_file(work, extension="txt")
    assert path.endswith(".txt")
    assert not os.path.exists(path)


def test_job_cleans_up_on_error(space):
    seen = []

    def boom(d):
        seen.append(d)
        raise KeyError("boom")

    with pytest.raises(KeyError):
        space.job_directory(boom)
    assert not os.path.exists(seen[0])


def test_job_file_validation(space):
    with pytest.raises(ValueError):
        space.job_file(lambda f: f, name="a.md", extension="")


def test_job_directory_async(space):
    async def exists(d):
        await asyncio.sleep(0)
        return os.path.isdir(d)

    async def run():
        return (
            await space.job_directory_async(exists),
            await space.job_directory_async(os.path.isdir),
            await space.job_directory_async(lambda d: d),
        )

    from_coro, from_sync, path = asyncio.run(run())
    assert from_coro is True
    assert from_sync is True
    assert not os.path.exists(path)


def test_job_file_async(space):
    async def check(f):
        return f.endswith("custom-name.md")

    async def run():
        return (
            await space.job_file_async(check, name="custom-name.md"),
            await space.job_file_async(lambda f: f.endswith("custom-name.md"), name="custom-name.md"),
            await space.job_file_async(os.path.dirname, name="custom-name.md"),
        )

    ok_async, ok_sync, parent = asyncio.run(run())
    assert ok_async and ok_sync
    assert not os.path.exists(parent)


def test_job_async_error_propagates_after_cleanup(space):
    seen = []

    async def boom(d):
        seen.append(d)
        raise RuntimeError("Catch me if you can!")

    with pytest.raises(RuntimeError, match="Catch me if you can!"):
        asyncio.run(space.job_directory_async(boom))
    assert not os.path.exists(seen[0])


def test_context_managers(space):
    with space.temporary_directory() as d:
        assert os.path.isdir(d)
    assert not os.path.exists(d)

    with space.temporary_file(name="notes.txt") as f:
        with open(f, "w") as fh:
            fh.write("x")
    assert not os.path.exists(os.path.dirname(f))

    async def run():
        async with space.temporary_file_async(extension="bin") as af:
            with open(af, "wb") as fh:
                fh.write(b"x")
        async with space.temporary_directory_async() as ad:
            assert os.path.isdir(ad)
        return af, ad

    af, ad = asyncio.run(run())
    assert not os.path.exists(af)
    assert not os.path.exists(ad)
