import numpy as np

def normalize(vecs):
    lens = np.sum(vecs**2, len(vecs.shape)-1)
    lens = np.sqrt(lens)
    lens = np.array(lens)
    lens.shape += (1, )
    lens[lens > 0] = 1.0 / lens[lens > 0]
    return vecs * lens

def as_vector(vec):
    return np.array(np.ravel(vec), dtype=np.float64)

def vec_norm(vec):
    return float(np.sqrt(np.dot(vec, vec)))

def normalize_vector(vec, min_length=0.0):
    """
    Returns the unit vector in the direction of vec, or None if vec is
    non-finite or not longer than min_length
    """
    vec = as_vector(vec)
    length = vec_norm(vec)
    if not np.isfinite(length) or length <= min_length:
        return None
    return vec / length

def dominant_axis(vec):
    "Index of the component with the largest magnitude"
    return int(np.argmax(np.abs(vec)))
