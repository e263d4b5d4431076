import pytest
from git import Actor, Repo


ALICE = Actor('Alice', 'a@x.com')
ALICE_RENAMED = Actor('Alice Smith', 'a@x.com')
BOB = Actor('Bob', 'b@y.com')


SAMPLE_LOG = [
    '> Alice <a@x.com>',
    '10  2  file1.txt',
    '',
    '> Bob <b@y.com>',
    '5  5  file2.txt',
    '',
    '> Alice <a@x.com>',
    '1  0  file1.txt',
]


@pytest.fixture
def sample_log():
    return list(SAMPLE_LOG)


def _commit(repo, message, author):
    repo.index.commit(message, author=author, committer=author)


@pytest.fixture
def git_repo(tmp_path):
    """A small repository with three non-merge commits.

    git log lists them newest first:
      Alice Smith  1  1  a.txt
      Bob          -  -  logo.png
      Alice        2  0  a.txt
    """
    repo = Repo.init(tmp_path)

    text_file = tmp_path / 'a.txt'
    text_file.write_text('one\ntwo\n')
    repo.index.add([str(text_file)])
    _commit(repo, 'Add a.txt', ALICE)

    binary_file = tmp_path / 'logo.png'
    binary_file.write_bytes(b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x01')
    repo.index.add([str(binary_file)])
    _commit(repo, 'Add logo', BOB)

    text_file.write_text('one\nthree\n')
    repo.index.add([str(text_file)])
    _commit(repo, 'Update a.txt', ALICE_RENAMED)

    yield tmp_path
    repo.close()
