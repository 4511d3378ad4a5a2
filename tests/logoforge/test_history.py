"""
Tests for HistoryLog.
"""

import pytest

from logoforge.editor import HistoryLog, describe_action
from logoforge.layers import ShapeLayer
from logoforge.scene import Scene


def scene_with(*names) -> Scene:
    return Scene(layers=[ShapeLayer(id=name, name=name) for name in names])


@pytest.fixture
def log() -> HistoryLog:
    return HistoryLog(Scene(), max_size=50)


class TestHistoryState:
    """Initial state and predicates."""

    def test_seeded_with_initial_entry(self, log):
        assert len(log) == 1
        assert log.labels() == ['Initial']
        assert log.current_index == 0
        assert log.current.description == 'Initial state'
        assert not log.can_undo
        assert not log.can_redo

    def test_default_max_size_from_settings(self):
        assert HistoryLog(Scene()).max_size == 50

    @pytest.mark.parametrize('max_size', [0, -3])
    def test_invalid_max_size(self, max_size):
        with pytest.raises(ValueError):
            HistoryLog(Scene(), max_size=max_size)

    def test_entry_metadata(self, log):
        entry = log.push(Scene(), 'Add shape Layer')
        assert entry.id.startswith('entry-')
        assert entry.id != log.entries[0].id
        assert entry.timestamp > 0
        assert entry.description == 'Add Shape Layer'

    def test_describe_action(self):
        assert describe_action('update_logo settings') == 'Update Logo Settings'


class TestHistoryTransitions:
    """push / undo / redo / jump_to."""

    def test_push_moves_pointer_to_end(self, log):
        log.push(Scene(), 'A')
        log.push(Scene(), 'B')
        assert log.current_index == 2
        assert log.can_undo
        assert not log.can_redo

    def test_undo_redo(self, log):
        log.push(Scene(), 'A')
        log.push(Scene(), 'B')
        assert log.undo().action == 'A'
        assert log.undo().action == 'Initial'
        assert log.undo() is None
        assert log.current_index == 0
        assert log.redo().action == 'A'
        assert log.redo().action == 'B'
        assert log.redo() is None
        assert log.current_index == 2

    def test_jump_to(self, log):
        log.push(Scene(), 'A')
        log.push(Scene(), 'B')
        assert log.jump_to(1).action == 'A'
        assert log.current_index == 1
        assert log.can_undo and log.can_redo

    @pytest.mark.parametrize('index', [-1, 3, 100])
    def test_jump_out_of_range_is_ignored(self, log, index):
        log.push(Scene(), 'A')
        log.push(Scene(), 'B')
        assert log.jump_to(index) is None
        assert log.current_index == 2

    def test_branch_discard(self, log):
        log.push(Scene(), 'A')
        log.push(Scene(), 'B')
        length_before_undo = len(log)
        log.undo()
        log.push(Scene(), 'C')
        assert len(log) == length_before_undo
        assert log.labels() == ['Initial', 'A', 'C']
        assert not log.can_redo

    def test_branch_discard_after_jump(self, log):
        for label in 'ABCD':
            log.push(Scene(), label)
        log.jump_to(1)
        log.push(Scene(), 'E')
        assert log.labels() == ['Initial', 'A', 'E']

    def test_bound_scenario(self):
        log = HistoryLog(Scene(), max_size=2)
        for label in ('A', 'B', 'C'):
            log.push(Scene(), label)
        assert log.labels() == ['B', 'C']
        assert log.current_index == 1

    def test_bound_evicts_oldest(self):
        log = HistoryLog(Scene(), max_size=5)
        for i in range(8):
            log.push(Scene(), f'p{i}')
        assert len(log) == 5
        assert log.labels() == ['p3', 'p4', 'p5', 'p6', 'p7']
        assert log.current_index == 4

    def test_clear_keeps_current_state(self, log):
        log.push(scene_with('a'), 'A')
        log.push(scene_with('a', 'b'), 'B')
        log.undo()
        log.clear()
        assert log.labels() == ['Initial']
        assert log.current.scene.layer_ids() == ['a']

    def test_clear_with_new_scene(self, log):
        log.push(scene_with('a'), 'A')
        log.clear(scene_with('b'))
        assert log.labels() == ['Initial']
        assert log.current.scene.layer_ids() == ['b']
        assert not log.can_undo


class TestSnapshots:
    """Entries hold independent copies."""

    def test_push_copies_scene(self, log):
        scene = scene_with('a')
        log.push(scene, 'A')
        scene.layers[0].name = 'changed'
        scene.layers.append(ShapeLayer(id='b'))
        stored = log.current.scene
        assert stored.layer_ids() == ['a']
        assert stored.layers[0].name == 'a'

    def test_initial_scene_is_copied(self):
        scene = scene_with('a')
        log = HistoryLog(scene)
        scene.layers.clear()
        assert log.current.scene.layer_ids() == ['a']

    def test_entries_is_a_copy(self, log):
        log.entries.clear()
        assert len(log) == 1
