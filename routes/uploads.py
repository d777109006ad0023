from flask import current_app, jsonify, send_from_directory

from routes import api_bp


# --- Serve Uploaded Files (local storage backend) ---
@api_bp.route('/uploads/<filename>', methods=['GET'])
def uploaded_file(filename):
    upload_folder = current_app.config['UPLOAD_FOLDER']
    return send_from_directory(upload_folder, filename)


@api_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({'status': 'ok'})
