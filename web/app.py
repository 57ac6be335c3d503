"""
Web Interface for Tailwind Class Categorization
"""

import os
import sys
import logging
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flask import Flask, request, jsonify
from core.categorizer import categorize_classes_and_viewports, format_class_string
from core.class_parser import ClassParseResult
from core.markup_extractor import MarkupExtractor
from tailwind.config_reader import FormatterConfig

logger = logging.getLogger(__name__)

app = Flask(__name__)
# Category order is significant
app.json.sort_keys = False
extractor = MarkupExtractor()


def resolve_config(payload: dict) -> FormatterConfig:
    """Use the request's config if given, otherwise the built-in defaults."""
    raw = payload.get('config')
    if raw is None:
        return FormatterConfig.defaults()
    if not isinstance(raw, dict):
        raise ValueError("'config' must be an object")
    return FormatterConfig.from_dict(raw)


@app.route('/api/categorize', methods=['POST'])
def categorize():
    """Categorize either a raw class string or already-parsed class lists."""
    try:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({'error': 'A JSON object body is required'}), 400
        config = resolve_config(payload)
        if 'class_string' in payload:
            if not isinstance(payload['class_string'], str):
                return jsonify({'error': "'class_string' must be a string"}), 400
            lines = format_class_string(payload['class_string'], config)
        elif 'classes' in payload:
            classes = payload['classes']
            viewport_classes = payload.get('viewport_classes') or {}
            if not isinstance(classes, list) or not isinstance(viewport_classes, dict):
                return jsonify({'error': "'classes' must be a list and 'viewport_classes' an object"}), 400
            if not all(isinstance(v, list) for v in viewport_classes.values()):
                return jsonify({'error': "Each 'viewport_classes' value must be a list"}), 400
            parsed = ClassParseResult.from_dict({'base_classes': classes, 'viewport_classes': viewport_classes})
            lines = categorize_classes_and_viewports(parsed, config)
        else:
            return jsonify({'error': "Either 'class_string' or 'classes' is required"}), 400
        return jsonify({'lines': lines})
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Categorization failed: {str(e)}", exc_info=True)
        return jsonify({'error': str(e)}), 500


@app.route('/api/preview', methods=['POST'])
def preview():
    """Preview formatting for every class attribute in an HTML/JSX snippet."""
    try:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({'error': 'A JSON object body is required'}), 400
        content = payload.get('content')
        filetype = payload.get('filetype', 'html')
        if not isinstance(content, str):
            return jsonify({'error': "'content' must be a string"}), 400
        if filetype not in ('html', 'jsx', 'tsx'):
            return jsonify({'error': 'Only html, jsx and tsx are supported'}), 400
        config = resolve_config(payload)
        return jsonify({'attributes': extractor.preview_markup(content, filetype, config)})
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Preview failed: {str(e)}", exc_info=True)
        return jsonify({'error': str(e)}), 500


@app.route('/api/config/defaults')
def config_defaults():
    return jsonify(FormatterConfig.defaults().to_dict())


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    port = int(os.environ.get("PORT", 5000))
    app.run(host='0.0.0.0', port=port)
