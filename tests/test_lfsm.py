import pytest

from pctoolkit.lfsm import Lfsm, LfsmEntry, output_calc


def test_output_calc_without_changes_keeps_feedback():
    assert output_calc(0b1011, 0, 0) == 0b1011


def test_output_calc_rising_sets_bits():
    assert output_calc(0, 0, 0b0110) == 0b0110


def test_output_calc_falling_clears_bits():
    assert output_calc(0b0110, 0b0110, 0) == 0


def test_fresh_machine_state():
    machine = Lfsm(4)
    assert (machine.page, machine.input, machine.output) == (0, 0, 0)
    assert machine.quant() == 0
    assert len(machine.memory) == 4


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Lfsm(-1)


def test_learn_then_read_reaches_next_output():
    machine = Lfsm(4)
    assert machine.learn(1, 6, 2) is True
    assert machine.quant() == 1
    assert machine.read(1) == 6
    assert machine.output == 6
    assert machine.page == 2
    assert machine.input == 1


def test_learn_does_not_change_state():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    assert (machine.input, machine.output, machine.page) == (0, 0, 0)


def test_learned_entry_contents():
    machine = Lfsm(2)
    machine.learn(1, 6, 2)
    entry = machine.memory[0]
    assert entry.page == 2
    assert entry.feedback == 0
    assert entry.inhl == 0
    assert entry.inlh == 1
    assert entry.outhl == 0
    assert entry.outlh == 6


def test_learn_page_zero_is_no_operation():
    machine = Lfsm(4)
    assert machine.learn(1, 6, 0) is False
    assert machine.quant() == 0


def test_learn_without_input_change_is_no_operation():
    machine = Lfsm(4)
    assert machine.learn(0, 6, 2) is False
    assert machine.quant() == 0


def test_learn_with_no_slots_is_no_operation():
    machine = Lfsm(0)
    assert machine.learn(1, 6, 2) is False


def test_learn_duplicate_rejected():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    with pytest.raises(ValueError):
        machine.learn(1, 3, 2)
    assert machine.quant() == 1


def test_learn_conflicting_with_global_rejected():
    machine = Lfsm(4)
    machine.learn(1, 6, 1)
    machine.output = 5
    with pytest.raises(ValueError):
        machine.learn(1, 3, 2)


def test_learn_memory_full():
    machine = Lfsm(1)
    machine.learn(1, 6, 2)
    with pytest.raises(OverflowError):
        machine.learn(2, 3, 2)
    assert machine.quant() == 1


def test_same_input_different_feedback_is_allowed():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    machine.output = 5
    assert machine.learn(1, 3, 2) is True
    assert machine.quant() == 2


def test_global_entry_fires_whatever_the_output():
    machine = Lfsm(4)
    machine.learn(1, 4, 1)
    machine.output = 3
    assert machine.read(1) == 4
    assert machine.page == 1


def test_local_entry_needs_matching_output():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    machine.output = 5
    assert machine.read(1) == 5
    assert machine.input == 1
    assert machine.page == 0


def test_read_without_change_keeps_state():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    assert machine.read(0) == 0
    assert machine.input == 0


def test_unrecognised_change_records_input():
    machine = Lfsm(4)
    assert machine.read(8) == 0
    assert machine.input == 8


def test_chain_of_transitions():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    machine.read(1)
    machine.learn(0, 9, 2)
    assert machine.read(0) == 9
    assert machine.input == 0


def test_remove_learned_entry():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    assert machine.remove(1) is True
    assert machine.quant() == 0
    assert machine.read(1) == 0


def test_remove_missing_entry():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    assert machine.remove(2) is False
    assert machine.quant() == 1


def test_delete_all():
    machine = Lfsm(4)
    machine.learn(1, 6, 2)
    machine.learn(2, 7, 1)
    machine.read(1)
    assert machine.delete_all() is True
    assert machine.quant() == 0
    assert machine.output == 0
    assert machine.delete_all() is False


def test_shared_memory_is_updated_in_place():
    memory = [LfsmEntry() for _ in range(3)]
    machine = Lfsm(memory=memory)
    machine.learn(1, 6, 2)
    assert memory[0].page == 2
    assert memory[0].outlh == 6
    assert all(entry.empty for entry in memory[1:])


def test_existing_memory_drives_reads():
    memory = [LfsmEntry(page=1, feedback=0, inhl=0, inlh=1, outhl=0, outlh=6)]
    machine = Lfsm(memory=memory)
    assert machine.read(1) == 6


def test_validate_returns_input_when_n_is_zero():
    machine = Lfsm(1)
    machine.read(0x1000)
    assert machine.validate(0) == 0x1000


def test_validate_steps_through_bits():
    machine = Lfsm(1)
    results = [machine.validate(0x1FF) for _ in range(18)]
    first_pass = [1 << bit for bit in range(9)]
    later_pass = [1 << bit for bit in range(1, 9)]
    assert results[:9] == first_pass
    assert results[9:17] == later_pass
    assert results[17] == results[9]
    assert all(bin(value).count("1") == 1 for value in results)