# -*- coding: utf-8 -*-
"""
test_cli.py - Tests for the strategy-wizard command line
"""

import json
import runpy
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from strategy_wizard.cli import EXIT_INFEASIBLE, EXIT_PENDING, cli
from strategy_wizard.config_manager import ConfigManager


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, config_path):
    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ['--config', str(config_path), '--log-level', 'ERROR', *args], **kwargs)
    return _invoke


def _json_tail(output):
    """The result JSON printed after the interactive prompts."""
    return json.loads(output[output.index('{\n'):])


class TestStrategies:

    def test_text_listing(self, invoke):
        result = invoke('strategies')

        assert result.exit_code == 0
        for name in ('SQL', 'HYBRID', 'EXPORT_IMPORT', 'SCHEMA_ONLY',
                     'STORAGE_MIGRATION', 'LINKED', 'COMMON', 'DUMP'):
            assert name in result.output

    def test_json_listing(self, invoke):
        result = invoke('strategies', '--json')

        payload = json.loads(result.output)
        assert len(payload) == 8
        assert payload['DUMP']['requirements'] == ["Access to source cluster only"]


class TestRecommend:

    def test_terminal_goal(self, invoke):
        result = invoke('recommend', '--goal', 'schemas_only', '--json')

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload['usable'] is True
        assert payload['recommendation']['strategy'] == 'SCHEMA_ONLY'

    def test_full_answers_text(self, invoke):
        result = invoke('recommend', '--goal', 'move_schemas_data', '--access', 'direct_access',
                        '--tables', 'large_partitions')

        assert result.exit_code == 0
        assert 'Recommended Strategy: SQL' in result.output
        assert 'Other Compatible Strategies' in result.output

    def test_case_insensitive_choices(self, invoke):
        result = invoke('recommend', '--goal', 'CONVERT_ICEBERG', '--iceberg', 'Same_Cluster', '--json')

        assert json.loads(result.output)['recommendation']['strategy'] == 'STORAGE_MIGRATION'

    def test_infeasible_exit_code(self, invoke):
        result = invoke('recommend', '--goal', 'move_schemas_data', '--access', 'no_access')

        assert result.exit_code == EXIT_INFEASIBLE
        assert 'No Strategy Available' in result.output
        assert 'Direct data movement not possible' in result.output

    def test_infeasible_json(self, invoke):
        result = invoke('recommend', '--goal', 'move_schemas_data', '--access', 'no_access', '--json')

        payload = json.loads(result.output)
        assert payload['usable'] is False
        assert payload['recommendation']['error']

    def test_pending_exit_code(self, invoke):
        result = invoke('recommend', '--goal', 'move_schemas_data')

        assert result.exit_code == EXIT_PENDING
        assert 'pending' in result.output

    def test_invalid_choice(self, invoke):
        result = invoke('recommend', '--goal', 'teleport')

        assert result.exit_code == 2
        assert 'teleport' in result.output


class TestRunDirect:

    def test_direct_prints_result(self, invoke, config_path):
        result = invoke('run', '--direct', 'hybrid')

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            'strategy': 'HYBRID',
            'reason': 'Directly selected HYBRID strategy',
            'path': ['Direct Selection'],
            'intermediateStorage': False,
        }
        assert ConfigManager(config_path).get('wizard.last_strategy') == 'HYBRID'

    def test_direct_to_output_file(self, invoke, tmp_path):
        output = tmp_path / 'result.json'

        result = invoke('run', '--direct', 'DUMP', '--output', str(output))

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding='utf-8'))['strategy'] == 'DUMP'

    def test_merge_into_existing_configuration(self, invoke, tmp_path):
        target = tmp_path / 'migration.json'
        target.write_text(json.dumps({'databases': ['sales'], 'dataStrategy': 'DUMP'}), encoding='utf-8')

        result = invoke('run', '--direct', 'SQL', '--merge-into', str(target))

        assert result.exit_code == 0
        merged = json.loads(target.read_text(encoding='utf-8'))
        assert merged['dataStrategy'] == 'SQL'
        assert merged['databases'] == ['sales']
        assert merged['strategySelection']['path'] == ['Direct Selection']

    def test_merge_into_new_file(self, invoke, tmp_path):
        target = tmp_path / 'fresh.json'

        invoke('run', '--direct', 'COMMON', '--merge-into', str(target))

        assert json.loads(target.read_text(encoding='utf-8'))['dataStrategy'] == 'COMMON'


class TestRunInteractive:

    def test_schemas_only(self, invoke):
        result = invoke('run', input='2\nc\n')

        assert result.exit_code == 0
        assert _json_tail(result.output)['strategy'] == 'SCHEMA_ONLY'

    def test_cross_cluster_small_partitions(self, invoke):
        result = invoke('run', input='1\n1\n2\nc\n')

        assert result.exit_code == 0
        payload = _json_tail(result.output)
        assert payload['strategy'] == 'EXPORT_IMPORT'
        assert len(payload['path']) == 3

    def test_intermediate_storage_note_shown(self, invoke):
        result = invoke('run', input='1\n2\n3\nc\n')

        assert 'intermediate storage for data transit' in result.output
        assert _json_tail(result.output)['intermediateStorage'] is True

    def test_back_then_change_goal(self, invoke):
        result = invoke('run', input='1\nb\n7\nc\n')

        assert result.exit_code == 0
        assert _json_tail(result.output)['strategy'] == 'DUMP'

    def test_infeasible_then_restart(self, invoke):
        result = invoke('run', input='1\n3\nr\n4\nc\n')

        assert result.exit_code == 0
        assert 'No Strategy Available' in result.output
        assert _json_tail(result.output)['strategy'] == 'STORAGE_MIGRATION'

    def test_skip_to_direct_selection(self, invoke):
        result = invoke('run', input='1\ns\nlinked\n')

        assert result.exit_code == 0
        assert _json_tail(result.output)['path'] == ['Direct Selection']

    def test_cancel(self, invoke, config_path):
        result = invoke('run', input='q\n')

        assert result.exit_code == 1
        assert 'Strategy selection cancelled' in result.output
        assert ConfigManager(config_path).get('wizard.last_strategy') is None


class TestGui:

    def test_gui_result_delivered(self, invoke, monkeypatch, tmp_path):
        pytest.importorskip("tkinter")
        from strategy_wizard.models import StrategySelectionResult
        from strategy_wizard.ui import wizard_dialog

        captured = {}

        def fake_run_dialog(back_navigation, show_alternatives):
            captured['back_navigation'] = back_navigation
            return StrategySelectionResult(strategy='SQL', reason='r', path=['Direct Selection'])

        monkeypatch.setattr(wizard_dialog, 'run_dialog', fake_run_dialog)
        target = tmp_path / 'migration.json'

        result = invoke('gui', '--merge-into', str(target))

        assert result.exit_code == 0
        assert captured['back_navigation'] == 'recompute'
        assert json.loads(target.read_text(encoding='utf-8'))['dataStrategy'] == 'SQL'

    def test_gui_cancelled(self, invoke, monkeypatch):
        pytest.importorskip("tkinter")
        from strategy_wizard.ui import wizard_dialog

        monkeypatch.setattr(wizard_dialog, 'run_dialog', lambda **kwargs: None)

        result = invoke('gui')

        assert result.exit_code == 1
        assert 'cancelled' in result.output


class TestDeliveryErrors:

    def test_malformed_merge_target(self, invoke, config_path, tmp_path):
        target = tmp_path / 'migration.json'
        target.write_text('{not json', encoding='utf-8')

        result = invoke('run', '--direct', 'SQL', '--merge-into', str(target))

        assert result.exit_code == 1
        assert not isinstance(result.exception, json.JSONDecodeError)
        assert 'Configuration Error' in result.output
        assert target.read_text(encoding='utf-8') == '{not json'
        assert ConfigManager(config_path).get('wizard.last_strategy') is None

    def test_merge_target_not_an_object(self, invoke, config_path, tmp_path):
        target = tmp_path / 'migration.json'
        target.write_text('[1]', encoding='utf-8')

        result = invoke('run', '--direct', 'HYBRID', '--merge-into', str(target))

        assert result.exit_code == 1
        assert 'Invalid Configuration' in result.output
        assert ConfigManager(config_path).get('wizard.last_strategy') is None

    def test_transfer_not_an_object(self, invoke, config_path, tmp_path):
        target = tmp_path / 'migration.json'
        target.write_text(json.dumps({'transfer': 's3a://bucket'}), encoding='utf-8')

        result = invoke('run', '--merge-into', str(target), input='1\n2\n3\nc\n')

        assert result.exit_code == 1
        assert 'Invalid Configuration' in result.output
        assert json.loads(target.read_text(encoding='utf-8')) == {'transfer': 's3a://bucket'}
        assert ConfigManager(config_path).get('wizard.last_strategy') is None


class TestConfigCommands:

    def test_show(self, invoke, config_path):
        result = invoke('config', 'show')

        assert result.exit_code == 0
        assert str(config_path) in result.output
        assert '"back_navigation": "recompute"' in result.output

    def test_export(self, invoke, tmp_path):
        target = tmp_path / 'exported.json'

        result = invoke('config', 'export', str(target))

        assert result.exit_code == 0
        assert json.loads(target.read_text(encoding='utf-8'))['wizard']['show_alternatives'] is True

    def test_import(self, invoke, config_path, tmp_path):
        source = tmp_path / 'shared.json'
        source.write_text(json.dumps({'wizard': {'back_navigation': 'history'}}), encoding='utf-8')

        result = invoke('config', 'import', str(source))

        assert result.exit_code == 0
        assert ConfigManager(config_path).back_navigation().value == 'history'

    def test_import_missing_file(self, invoke, tmp_path):
        result = invoke('config', 'import', str(tmp_path / 'missing.json'))

        assert result.exit_code == 1
        assert 'Could not import' in result.output

    def test_reset(self, invoke, config_path):
        ConfigManager(config_path).set('wizard.show_alternatives', False)

        result = invoke('config', 'reset', '--yes')

        assert result.exit_code == 0
        assert ConfigManager(config_path).get('wizard.show_alternatives') is True

    def test_reset_declined(self, invoke, config_path):
        ConfigManager(config_path).set('wizard.show_alternatives', False)

        result = invoke('config', 'reset', input='n\n')

        assert result.exit_code == 1
        assert ConfigManager(config_path).get('wizard.show_alternatives') is False


class TestEntryPoints:

    ARGS = ['--log-level', 'ERROR', 'strategies']

    def test_console_script_main(self, monkeypatch, capsys, config_path):
        from strategy_wizard.cli import main

        monkeypatch.setattr(sys, 'argv', ['strategy-wizard', '--config', str(config_path), *self.ARGS])

        with pytest.raises(SystemExit) as exc:
            main()

        assert exc.value.code == 0
        assert 'EXPORT_IMPORT' in capsys.readouterr().out

    def test_main_script_uses_console_entry(self, monkeypatch, capsys, config_path):
        monkeypatch.setattr(sys, 'argv', ['main.py', '--config', str(config_path), *self.ARGS])

        with pytest.raises(SystemExit) as exc:
            runpy.run_path(str(Path(__file__).resolve().parents[1] / 'main.py'), run_name='__main__')

        assert exc.value.code == 0
        assert 'STORAGE_MIGRATION' in capsys.readouterr().out
