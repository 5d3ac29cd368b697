import json
import logging

import pytest

from traitlets import Enum, TraitError

from pathdiff.args import (
    ConfigBackedParser, LogLevelAction, add_diff_args, add_projection_args,
    modify_config_for_print,
)
from pathdiff.config import (
    entrypoint_configurables, build_config, Global, Diff, Project,
)
import pathdiff.log


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)

@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']

class DiffConfig1(Diff):
    pass

class DiffConfig2(DiffConfig1):
    pass

@pytest.fixture
def entrypoint_diff_config():
    entrypoint_configurables['test-prog'] = DiffConfig2
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert pathdiff.log.logger.level == logging.ERROR


def test_config_parser_unknown_entrypoint():
    parser = ConfigBackedParser('not-configured')
    add_diff_args(parser)
    arguments = parser.parse_args(['--ignore', '$.a'])
    assert arguments.ignore == ['$.a']
    assert arguments.include_objects is False


def test_diff_config_from_file(entrypoint_diff_config, tmpdir):
    tmpdir.join('pathdiff_config.json').write_text(
        json.dumps({
            'DiffConfig1': {
                'include_objects': True,
                'ignore': ['$.metadata'],
            },
        }),
        encoding='utf-8'
    )

    parser = ConfigBackedParser('test-prog')
    add_diff_args(parser)
    with tmpdir.as_cwd():
        parsed = parser.parse_args([])

    assert parsed.include_objects is True
    assert parsed.ignore == ['$.metadata']


def test_diff_config_merge(entrypoint_diff_config, tmpdir):
    tmpdir.join('pathdiff_config.json').write_text(
        json.dumps({
            'DiffConfig1': {
                'include_objects': True,
                'ignore': ['$.metadata'],
            },
            'DiffConfig2': {
                'ignore': ['$.cells[*].id'],
            },
        }),
        encoding='utf-8'
    )

    parser = ConfigBackedParser('test-prog')
    add_diff_args(parser)
    with tmpdir.as_cwd():
        parsed = parser.parse_args(['--ignore', '$.other'])

    assert parsed.include_objects is True
    # Lists are not merged, but command line values are appended:
    assert parsed.ignore == ['$.cells[*].id', '$.other']


def test_build_config_defaults(tmpdir):
    with tmpdir.as_cwd():
        config = build_config('pathdiff-project')
    assert config == {'log_level': 'INFO', 'include': [], 'exclude': []}


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('not-configured')


def test_projection_args():
    parser = ConfigBackedParser('not-configured')
    add_projection_args(parser)
    arguments = parser.parse_args(['--include', '$.a', '--exclude', '$.a.b', '--include', '$.c'])
    assert arguments.include == ['$.a', '$.c']
    assert arguments.exclude == ['$.a.b']


def test_pattern_list_trait_validates_patterns():
    p = Project()
    p.include = ['$.a[*]', '$.b']
    assert p.include == ['$.a[*]', '$.b']
    with pytest.raises(TraitError):
        p.exclude = ['not a pattern']


def test_modify_config_for_print():
    assert modify_config_for_print({'a': [1], 'b': {}, 'c': {'d': None}}) == {
        'a': '[1]', 'b': '{}', 'c': {'d': 'null'},
    }
