from scripts.generate_mock_patients import seed


def test_seed_inserts_unique_record_numbers(repository):
    assert seed(repository, 25, seed_value=7) == 25

    patients = repository.list()
    assert len(patients) == 25
    assert len({p.record_number for p in patients}) == 25
    assert patients[0].record_number == "PT002026000025"
    assert all(p.name and p.phone_number for p in patients)
