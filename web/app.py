"""
N-gram Suggestion Web API

A Flask application for training a suggestion model in the background
and querying next-word suggestions as JSON.
"""

import threading
from typing import Optional, Dict, List
from flask import Flask, jsonify, request

from nextword import NGramModel
from nextword.corpus import load_brown_corpus, get_brown_categories
from nextword.model import DEFAULT_TOP_K


app = Flask(__name__)
app.config['MAX_TOP_K'] = 50

# Global state
model: Optional[NGramModel] = None
training_status: Dict = {
    'is_training': False,
    'progress': 0,
    'total': 100,
    'stage': 'idle',
    'message': '',
    'error': None,
    'stats': None
}
training_lock = threading.Lock()


def suggestions_to_json(ranked) -> Dict:
    best = ranked[0] if ranked else None
    return {
        'word': best.word if best else '',
        'score': best.score if best else 0,
        'candidates': [{'word': s.word, 'score': s.score} for s in ranked]
    }


def train_model_async(text: Optional[str] = None,
                      categories: Optional[List[str]] = None):
    """Train a model in a background thread and publish it when done."""
    global model

    try:
        with training_lock:
            training_status['is_training'] = True
            training_status['progress'] = 0
            training_status['stage'] = 'loading'
            training_status['error'] = None

        if text is None:
            with training_lock:
                training_status['message'] = 'Loading Brown corpus...'
            text, corpus_stats = load_brown_corpus(categories=categories)
            message = f'Loaded {corpus_stats["num_words"]:,} words'
        else:
            message = f'Received {len(text):,} characters'

        with training_lock:
            training_status['stage'] = 'loaded'
            training_status['message'] = message
            training_status['progress'] = 10

        def progress_callback(current, total, stage=""):
            with training_lock:
                # Map progress to 10-95 range
                progress = 10 + int((current / max(total, 1)) * 85)
                training_status['progress'] = progress
                training_status['stage'] = stage
                training_status['message'] = f'{stage}: {current:,}/{total:,}'

        with training_lock:
            training_status['stage'] = 'training'
            training_status['message'] = 'Training model...'

        new_model = NGramModel.train(text, progress_callback=progress_callback)

        with training_lock:
            model = new_model
            training_status['progress'] = 100
            training_status['stage'] = 'complete'
            training_status['message'] = 'Training complete!'
            training_status['stats'] = new_model.training_stats
            training_status['is_training'] = False

    except Exception as e:
        with training_lock:
            training_status['error'] = str(e)
            training_status['is_training'] = False
            training_status['stage'] = 'error'
            training_status['message'] = f'Error: {str(e)}'


def current_model() -> Optional[NGramModel]:
    with training_lock:
        return model


@app.route('/api/categories')
def api_categories():
    """List Brown corpus categories."""
    return jsonify(get_brown_categories())


@app.route('/api/train', methods=['POST'])
def api_train():
    """Start model training."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON body with "text" or "categories"'}), 400

    text = data.get('text')
    categories = data.get('categories')

    if text is not None and not isinstance(text, str):
        return jsonify({'error': '"text" must be a string'}), 400

    with training_lock:
        if training_status['is_training']:
            return jsonify({'error': 'Training already in progress'}), 400
        training_status['is_training'] = True

    thread = threading.Thread(
        target=train_model_async,
        args=(text, categories)
    )
    thread.daemon = True
    thread.start()

    return jsonify({'message': 'Training started'})


@app.route('/api/status')
def api_status():
    """Get training status."""
    with training_lock:
        return jsonify(training_status)


@app.route('/api/model/info')
def api_model_info():
    """Get model information."""
    trained = current_model()
    if trained is None:
        return jsonify({'error': 'No model trained'}), 400

    return jsonify({
        'vocab_size': trained.vocab_count,
        'stats': trained.training_stats
    })


@app.route('/api/top_words')
def api_top_words():
    """Get top words from the model."""
    trained = current_model()
    if trained is None:
        return jsonify({'error': 'No model trained'}), 400

    k = request.args.get('k', 100, type=int)
    if k < 1:
        return jsonify({'error': 'k must be at least 1'}), 400

    return jsonify([
        {'word': word, 'count': count}
        for word, count in trained.top_words(k)
    ])


@app.route('/api/suggest')
def api_suggest():
    """Get next-word suggestions at every context length."""
    trained = current_model()
    if trained is None:
        return jsonify({'error': 'No model trained'}), 400

    text = request.args.get('input', '')
    k = request.args.get('k', DEFAULT_TOP_K, type=int)
    if k < 1:
        return jsonify({'error': 'k must be at least 1'}), 400
    k = min(k, app.config['MAX_TOP_K'])

    return jsonify({
        'input': text,
        'unigram': suggestions_to_json(trained.rank_unigram(text, top_k=k)),
        'bigram': suggestions_to_json(trained.rank_bigram(text, top_k=k)),
        'trigram': suggestions_to_json(trained.rank_trigram(text, top_k=k))
    })
