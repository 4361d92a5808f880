import numpy as np
import pandas as pd
import pytest

from bayeslab.naive_bayes import GaussianNB, MultinomialNB

FAMILIES = [
    pytest.param((lambda: MultinomialNB(alpha=1.0), 'random_counts'), id='multinomial'),
    pytest.param((lambda: GaussianNB(density='compat'), 'random_blobs'), id='gaussian-compat'),
    pytest.param((lambda: GaussianNB(density='normal'), 'random_blobs'), id='gaussian-normal'),
]


@pytest.fixture(params=FAMILIES)
def fitted(request):
    make, data = request.param
    x, y = request.getfixturevalue(data)
    return make().fit(x, y), x, y


def test_probabilities_are_normalized(fitted):
    model, x, _ = fitted
    probs = model.predict_proba(x)
    assert probs.shape == (x.shape[0], model.n_classes_)
    np.testing.assert_allclose(probs.sum(axis=1), 1.0, atol=1e-9)
    assert ((probs >= 0.0) & (probs <= 1.0)).all()


def test_predict_agrees_with_predict_proba(fitted):
    model, x, _ = fitted
    jll = model.joint_log_likelihood(x)
    assert np.isfinite(jll).all()
    expected = model.classes_[np.argmax(model.predict_proba(x), axis=1)]
    np.testing.assert_array_equal(model.predict(x), expected)


def test_predict_log_proba_matches_predict_proba(fitted):
    model, x, _ = fitted
    np.testing.assert_allclose(np.exp(model.predict_log_proba(x)), model.predict_proba(x))
    np.testing.assert_allclose(np.exp(model.predict_log_proba(x[0])), model.predict_proba(x[0]))


def test_single_row_matrix_matches_observation(fitted):
    model, x, _ = fitted
    row = x[3]
    batch = model.predict(x[3:4])
    assert batch.shape == (1,)
    assert batch[0] == model.predict(row)
    assert np.ndim(model.predict(row)) == 0

    probs = model.predict_proba(x[3:4])
    assert probs.shape == (1, model.n_classes_)
    np.testing.assert_allclose(probs[0], model.predict_proba(row))
    assert model.predict_proba(row).shape == (model.n_classes_,)


def test_explicit_entry_points_match_dispatch(fitted):
    model, x, _ = fitted
    np.testing.assert_array_equal(model.predict_batch(x), model.predict(x))
    assert model.predict_one(x[0]) == model.predict(x[0])
    np.testing.assert_allclose(model.predict_proba_batch(x), model.predict_proba(x))
    np.testing.assert_allclose(model.predict_proba_one(list(x[0])), model.predict_proba(x[0]))


def test_row_order_is_preserved(fitted):
    model, x, _ = fitted
    reversed_pred = model.predict(x[::-1])
    np.testing.assert_array_equal(reversed_pred[::-1], model.predict(x))


def test_pandas_inputs(fitted):
    model, x, _ = fitted
    df = pd.DataFrame(x, columns=[f"f{j}" for j in range(x.shape[1])])
    np.testing.assert_array_equal(model.predict(df), model.predict(x))
    assert model.predict(df.iloc[2]) == model.predict(x[2])


def test_predictions_are_repeatable(fitted):
    model, x, _ = fitted
    first = model.predict(x)
    for _ in range(3):
        np.testing.assert_array_equal(model.predict(x), first)


def test_tie_goes_to_lower_indexed_class():
    model = MultinomialNB().fit([[1, 0], [0, 1]], [1, 0])
    np.testing.assert_allclose(model.predict_proba([1, 1]), [0.5, 0.5])
    assert [model.predict([1, 1]) for _ in range(5)] == [0] * 5


def test_gaussian_tie_goes_to_lower_indexed_class():
    x = [[1.0], [3.0], [1.0], [3.0]]
    model = GaussianNB(density='normal').fit(x, ['b', 'b', 'a', 'a'])
    assert model.predict([2.0]) == 'a'


@pytest.mark.parametrize('model', [MultinomialNB(), GaussianNB()])
def test_predict_before_fit(model):
    with pytest.raises(ValueError, match="must be fitted"):
        model.predict([1.0, 2.0])
    with pytest.raises(ValueError, match="must be fitted"):
        model.predict_proba([[1.0, 2.0]])


def test_feature_count_mismatch(fitted):
    model, x, _ = fitted
    with pytest.raises(ValueError, match="features"):
        model.predict(x[:, :-1])
    with pytest.raises(ValueError, match="features"):
        model.predict_proba(list(x[0]) + [1.0])


def test_predict_rejects_garbage(fitted):
    model, _, _ = fitted
    with pytest.raises(TypeError):
        model.predict('abc')
    with pytest.raises(TypeError):
        model.predict_proba(None)
