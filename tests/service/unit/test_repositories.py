import pytest
from src.common.exceptions import DatasetError
from src.service.domain.datasets import DatasetName
from src.service.infrastructure.repositories import JsonDatasetRepository
from tests.sample_data import POI, BASELINE

@pytest.fixture
def repository(data_dir):
    return JsonDatasetRepository(str(data_dir))

def test_dataset_filenames():
    assert DatasetName.POI.filename == "poi.json"
    assert DatasetName.CCTV.filename == "cctv.json"
    assert DatasetName.BASELINE.filename == "baseline.json"

def test_load_returns_content(repository):
    assert repository.load(DatasetName.POI) == POI
    assert repository.load(DatasetName.BASELINE) == BASELINE

def test_load_rereads_file(repository, data_dir):
    assert repository.load(DatasetName.CCTV)[0]["id"] == "cctv-1"
    (data_dir / "cctv.json").write_text('[{"id": "cctv-2"}]', encoding="utf-8")
    assert repository.load(DatasetName.CCTV) == [{"id": "cctv-2"}]

def test_missing_dataset(repository, data_dir):
    (data_dir / "poi.json").unlink()
    with pytest.raises(DatasetError, match="poi.json"):
        repository.load(DatasetName.POI)

def test_malformed_dataset(repository, data_dir):
    (data_dir / "baseline.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(DatasetError, match="not valid JSON"):
        repository.load(DatasetName.BASELINE)
