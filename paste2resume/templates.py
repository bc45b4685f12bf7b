"""
Inline HTML template for the resume form UI.
"""

HTML_TEMPLATE = '''
<!DOCTYPE html>
<html>
<head>
    <title>AI Resume - Create Your Resume</title>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #0a0a0a;
            min-height: 100vh;
            padding: 20px;
            color: #e0e0e0;
        }
        .container { max-width: 960px; margin: 0 auto; }
        .header {
            background: #1a1a1a;
            border-radius: 12px;
            padding: 25px;
            margin-bottom: 20px;
            border: 1px solid #2a2a2a;
            text-align: center;
        }
        h1 { color: #ffffff; font-size: 28px; margin-bottom: 5px; }
        h3 { color: #ffffff; font-size: 15px; margin: 18px 0 8px; }
        .subtitle { color: #888; font-size: 14px; }
        .card {
            background: #1a1a1a;
            border-radius: 12px;
            padding: 25px;
            border: 1px solid #2a2a2a;
            margin-bottom: 20px;
        }
        .card h2 { color: #ffffff; font-size: 20px; margin-bottom: 12px; }
        .hint { color: #888; font-size: 13px; margin-bottom: 15px; }
        .form-group { margin-bottom: 15px; }
        .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }
        label { display: block; font-weight: 600; margin-bottom: 6px; color: #e0e0e0; font-size: 14px; }
        input, textarea {
            width: 100%;
            padding: 10px;
            border: 1px solid #2a2a2a;
            border-radius: 8px;
            font-size: 14px;
            background: #0a0a0a;
            color: #e0e0e0;
            font-family: inherit;
        }
        input:focus, textarea:focus { outline: none; border-color: #666; background: #1a1a1a; }
        button {
            background: #2a2a2a;
            color: #e0e0e0;
            border: 1px solid #3a3a3a;
            padding: 12px 25px;
            font-size: 15px;
            font-weight: 600;
            border-radius: 8px;
            cursor: pointer;
            width: 100%;
            margin-top: 10px;
            transition: all 0.2s;
        }
        button:hover { background: #3a3a3a; border-color: #4a4a4a; }
        button:disabled { opacity: 0.4; cursor: not-allowed; }
        button.small { width: auto; padding: 6px 14px; font-size: 13px; margin-top: 6px; }
        .entry { border: 1px solid #2a2a2a; border-radius: 8px; padding: 12px; margin-bottom: 10px; }
        .status { padding: 15px; border-radius: 8px; margin-bottom: 15px; font-size: 14px; border: 1px solid #2a2a2a; }
        .status.error { color: #e88; }
        .spinner { border: 3px solid #2a2a2a; border-top: 3px solid #ffffff; border-radius: 50%; width: 18px; height: 18px; animation: spin 1s linear infinite; display: inline-block; margin-right: 10px; vertical-align: middle; }
        @keyframes spin { 0% { transform: rotate(0deg); } 100% { transform: rotate(360deg); } }
        iframe { width: 100%; height: 800px; border: 1px solid #2a2a2a; border-radius: 8px; background: #fff; }
        a.download { color: #ffffff; display: inline-block; margin-top: 10px; }
        .hidden { display: none; }
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Create Your Resume</h1>
            <p class="subtitle">Paste your content, review what the AI extracted, and download a PDF.</p>
        </div>

        <div class="card">
            <h2>Content Analyzer</h2>
            <p class="hint">
                Copy and paste the entire content of the webpage that contains your professional
                information: your LinkedIn profile, personal website, or any other page that
                summarizes your experience and skills.
            </p>
            <div class="form-group">
                <label for="content">Paste Your Content Here</label>
                <textarea id="content" rows="10" placeholder="Paste the entire content of your professional webpage here..."></textarea>
            </div>
            <div class="form-group">
                <label for="customInput">Additional Information</label>
                <textarea id="customInput" rows="4" placeholder="Any additional information you'd like to include in your resume..."></textarea>
            </div>
            <button type="button" id="analyzeBtn">Analyze Content</button>
        </div>

        <div id="status"></div>

        <div class="card hidden" id="editor">
            <h2>Extracted Information</h2>
            <p class="hint">Review and edit the fields below before generating the PDF.</p>
            <div class="grid">
                <div class="form-group"><label for="name">Name</label><input id="name"></div>
                <div class="form-group"><label for="age">Age</label><input id="age" type="number" min="0"></div>
                <div class="form-group"><label for="location">Location</label><input id="location"></div>
                <div class="form-group"><label for="email">Email</label><input id="email" type="email"></div>
                <div class="form-group"><label for="phone">Phone</label><input id="phone"></div>
            </div>
            <div class="form-group">
                <label for="resume_style_notes">Style Notes</label>
                <textarea id="resume_style_notes" rows="2"></textarea>
            </div>
            <div id="lists"></div>
        </div>

        <div class="card">
            <button type="button" id="generateBtn">Generate Resume PDF</button>
        </div>

        <div class="card hidden" id="preview">
            <h2>Your Resume</h2>
            <iframe id="pdfFrame" title="Resume preview"></iframe>
            <a class="download" id="downloadLink" download="resume.pdf">Download PDF</a>
        </div>
    </div>

    <script>
        const LISTS = {
            links: { label: 'Links', fields: null },
            interests: { label: 'Interests', fields: ['interest', 'description'] },
            work_experience: { label: 'Work Experience', fields: ['company', 'position', 'location', 'start_date', 'end_date', 'description'] },
            education: { label: 'Education', fields: ['school', 'degree', 'field_of_study', 'graduation_year'] },
            certifications: { label: 'Certifications', fields: ['name', 'organization', 'date_earned'] }
        };
        const SCALARS = ['name', 'location', 'email', 'phone', 'resume_style_notes'];
        let record = null;

        function setStatus(message, kind) {
            const status = document.getElementById('status');
            status.innerHTML = '';
            if (!message) return;
            const box = document.createElement('div');
            box.className = `status ${kind || ''}`;
            if (kind === 'loading') {
                const spinner = document.createElement('div');
                spinner.className = 'spinner';
                box.appendChild(spinner);
            }
            // Error text comes from the server; never parse it as markup
            box.appendChild(document.createTextNode(message));
            status.appendChild(box);
        }

        function humanize(key) {
            return key.replace(/_/g, ' ').replace(/\\b\\w/g, c => c.toUpperCase());
        }

        function renderLists() {
            const container = document.getElementById('lists');
            container.innerHTML = '';
            Object.entries(LISTS).forEach(([key, section]) => {
                const block = document.createElement('div');
                block.innerHTML = `<h3>${section.label}</h3>`;
                (record[key] || []).forEach((item, index) => {
                    const entry = document.createElement('div');
                    entry.className = 'entry';
                    if (section.fields === null) {
                        entry.appendChild(makeInput(item || '', value => { record[key][index] = value; }));
                    } else {
                        section.fields.forEach(field => {
                            const label = document.createElement('label');
                            label.textContent = humanize(field);
                            entry.appendChild(label);
                            entry.appendChild(makeInput(item[field] ?? '', value => { item[field] = value || null; }, field === 'description'));
                        });
                    }
                    const remove = document.createElement('button');
                    remove.type = 'button';
                    remove.className = 'small';
                    remove.textContent = 'Remove';
                    remove.onclick = () => { record[key].splice(index, 1); renderLists(); };
                    entry.appendChild(remove);
                    block.appendChild(entry);
                });
                const add = document.createElement('button');
                add.type = 'button';
                add.className = 'small';
                add.textContent = `Add ${section.label}`;
                add.onclick = () => { record[key].push(section.fields === null ? '' : {}); renderLists(); };
                block.appendChild(add);
                container.appendChild(block);
            });
        }

        function makeInput(value, onChange, multiline) {
            const input = document.createElement(multiline ? 'textarea' : 'input');
            input.value = value;
            input.addEventListener('input', e => onChange(e.target.value));
            return input;
        }

        function showRecord(data) {
            record = data;
            Object.keys(LISTS).forEach(key => { record[key] = record[key] || []; });
            SCALARS.forEach(key => { document.getElementById(key).value = record[key] || ''; });
            document.getElementById('age').value = record.age ?? '';
            renderLists();
            document.getElementById('editor').classList.remove('hidden');
        }

        function collectRecord() {
            SCALARS.forEach(key => { record[key] = document.getElementById(key).value || null; });
            const age = document.getElementById('age').value;
            record.age = age ? parseInt(age, 10) : null;
            return record;
        }

        function requestBody() {
            return {
                content: document.getElementById('content').value,
                customInput: document.getElementById('customInput').value
            };
        }

        async function postJson(url, body) {
            const response = await fetch(url, {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify(body)
            });
            if (!response.ok) {
                let message = 'Request failed';
                try { message = (await response.json()).error || message; } catch (e) {}
                throw new Error(message);
            }
            return response;
        }

        document.getElementById('analyzeBtn').addEventListener('click', async () => {
            const button = document.getElementById('analyzeBtn');
            button.disabled = true;
            setStatus('Analyzing content...', 'loading');
            try {
                const response = await postJson('/api/resume/extract', requestBody());
                showRecord((await response.json()).record);
                setStatus('');
            } catch (error) {
                setStatus(`Error analyzing content: ${error.message}`, 'error');
            } finally {
                button.disabled = false;
            }
        });

        document.getElementById('generateBtn').addEventListener('click', async () => {
            const button = document.getElementById('generateBtn');
            button.disabled = true;
            setStatus('Generating your resume... This may take a minute.', 'loading');
            try {
                const response = record
                    ? await postJson('/api/resume/render', { record: collectRecord() })
                    : await postJson('/api/resume', requestBody());
                const url = URL.createObjectURL(await response.blob());
                document.getElementById('pdfFrame').src = url;
                document.getElementById('downloadLink').href = url;
                document.getElementById('preview').classList.remove('hidden');
                setStatus('');
            } catch (error) {
                setStatus(`Error generating resume: ${error.message}`, 'error');
            } finally {
                button.disabled = false;
            }
        });
    </script>
</body>
</html>
'''
